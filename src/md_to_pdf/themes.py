"""Bundled GitHub-flavoured stylesheets used for PDF output."""

from __future__ import annotations

from enum import Enum


class Theme(str, Enum):
    """Closed set of stylesheets shipped with the package."""

    GITHUB_LIGHT = "github-light"
    GITHUB_DARK = "github-dark"
    GITHUB_AUTO = "github-auto"


DEFAULT_THEME = Theme.GITHUB_LIGHT

_LIGHT_PALETTE = """\
  --fg-default: #1f2328;
  --fg-muted: #59636e;
  --fg-accent: #0969da;
  --bg-default: #ffffff;
  --bg-muted: #f6f8fa;
  --bg-neutral: rgba(129, 139, 152, 0.12);
  --border-default: #d1d9e0;
  --border-muted: #d1d9e0b3;
  --fg-danger: #d1242f;
"""

_DARK_PALETTE = """\
  --fg-default: #f0f6fc;
  --fg-muted: #9198a1;
  --fg-accent: #4493f8;
  --bg-default: #0d1117;
  --bg-muted: #151b23;
  --bg-neutral: rgba(101, 108, 118, 0.2);
  --border-default: #3d444d;
  --border-muted: #3d444db3;
  --fg-danger: #f85149;
"""

_BODY_RULES = """\
.markdown-body {
  color-scheme: %(scheme)s;
  -ms-text-size-adjust: 100%%;
  -webkit-text-size-adjust: 100%%;
  margin: 0;
  padding: 32px;
  color: var(--fg-default);
  background-color: var(--bg-default);
  font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", "Noto Sans",
    Helvetica, Arial, sans-serif, "Apple Color Emoji", "Segoe UI Emoji";
  font-size: 16px;
  line-height: 1.5;
  word-wrap: break-word;
}
html, body { background-color: var(--bg-default); margin: 0; }
.markdown-body a { color: var(--fg-accent); text-decoration: none; }
.markdown-body a:hover { text-decoration: underline; }
.markdown-body h1, .markdown-body h2, .markdown-body h3,
.markdown-body h4, .markdown-body h5, .markdown-body h6 {
  margin-top: 24px;
  margin-bottom: 16px;
  font-weight: 600;
  line-height: 1.25;
  page-break-after: avoid;
}
.markdown-body h1 {
  font-size: 2em;
  padding-bottom: 0.3em;
  border-bottom: 1px solid var(--border-muted);
}
.markdown-body h2 {
  font-size: 1.5em;
  padding-bottom: 0.3em;
  border-bottom: 1px solid var(--border-muted);
}
.markdown-body h3 { font-size: 1.25em; }
.markdown-body h4 { font-size: 1em; }
.markdown-body h5 { font-size: 0.875em; }
.markdown-body h6 { font-size: 0.85em; color: var(--fg-muted); }
.markdown-body p, .markdown-body blockquote, .markdown-body ul,
.markdown-body ol, .markdown-body dl, .markdown-body table,
.markdown-body pre { margin-top: 0; margin-bottom: 16px; }
.markdown-body ul, .markdown-body ol { padding-left: 2em; }
.markdown-body li + li { margin-top: 0.25em; }
.markdown-body blockquote {
  margin-left: 0;
  padding: 0 1em;
  color: var(--fg-muted);
  border-left: 0.25em solid var(--border-default);
}
.markdown-body hr {
  height: 0.25em;
  padding: 0;
  margin: 24px 0;
  background-color: var(--border-default);
  border: 0;
}
.markdown-body code, .markdown-body tt {
  padding: 0.2em 0.4em;
  margin: 0;
  font-size: 85%%;
  white-space: break-spaces;
  background-color: var(--bg-neutral);
  border-radius: 6px;
  font-family: ui-monospace, SFMono-Regular, "SF Mono", Menlo, Consolas,
    "Liberation Mono", monospace;
}
.markdown-body pre {
  padding: 16px;
  overflow: auto;
  font-size: 85%%;
  line-height: 1.45;
  color: var(--fg-default);
  background-color: var(--bg-muted);
  border-radius: 6px;
  page-break-inside: avoid;
}
.markdown-body pre code {
  display: inline;
  padding: 0;
  margin: 0;
  font-size: 100%%;
  white-space: pre;
  background-color: transparent;
  border: 0;
}
.markdown-body table {
  display: block;
  width: max-content;
  max-width: 100%%;
  overflow: auto;
  border-spacing: 0;
  border-collapse: collapse;
}
.markdown-body table th { font-weight: 600; }
.markdown-body table th, .markdown-body table td {
  padding: 6px 13px;
  border: 1px solid var(--border-default);
}
.markdown-body table tr {
  background-color: var(--bg-default);
  border-top: 1px solid var(--border-muted);
}
.markdown-body table tr:nth-child(2n) { background-color: var(--bg-muted); }
.markdown-body img {
  max-width: 100%%;
  box-sizing: content-box;
  background-color: var(--bg-default);
}
.markdown-body kbd {
  display: inline-block;
  padding: 3px 5px;
  font-size: 11px;
  line-height: 10px;
  color: var(--fg-default);
  vertical-align: middle;
  background-color: var(--bg-muted);
  border: solid 1px var(--border-muted);
  border-radius: 6px;
}
"""


def _root(palette: str) -> str:
    return ":root {\n" + palette + "}\n"


_GITHUB_LIGHT_CSS = _root(_LIGHT_PALETTE) + _BODY_RULES % {"scheme": "light"}
_GITHUB_DARK_CSS = _root(_DARK_PALETTE) + _BODY_RULES % {"scheme": "dark"}
_GITHUB_AUTO_CSS = (
    # Light palette first so renderers without media-query support keep it;
    # the later dark block overrides it when the reader prefers dark.
    _root(_LIGHT_PALETTE)
    + "@media (prefers-color-scheme: dark) {\n"
    + _root(_DARK_PALETTE)
    + "}\n"
    + _BODY_RULES % {"scheme": "light dark"}
)

_STYLESHEETS: dict[Theme, str] = {
    Theme.GITHUB_LIGHT: _GITHUB_LIGHT_CSS,
    Theme.GITHUB_DARK: _GITHUB_DARK_CSS,
    Theme.GITHUB_AUTO: _GITHUB_AUTO_CSS,
}

_DISPLAY_NAMES: dict[Theme, str] = {
    Theme.GITHUB_LIGHT: "GitHub Light",
    Theme.GITHUB_DARK: "GitHub Dark",
    Theme.GITHUB_AUTO: "GitHub Auto",
}

_ALIASES: dict[str, Theme] = {
    "light": Theme.GITHUB_LIGHT,
    "dark": Theme.GITHUB_DARK,
    "auto": Theme.GITHUB_AUTO,
}


def resolve(theme: Theme) -> str:
    """Return the stylesheet text for ``theme``."""
    return _STYLESHEETS[theme]


def display_name(theme: Theme) -> str:
    """Return the human-readable name for ``theme``."""
    return _DISPLAY_NAMES[theme]


def all_themes() -> tuple[Theme, ...]:
    """Return every available theme in declaration order."""
    return tuple(Theme)


def parse_theme(value: str | Theme) -> Theme:
    """Coerce a theme selector into a :class:`Theme`.

    Parameters
    ----------
    value : str | Theme
        Enum value (``github-dark``), short alias (``dark``) or display name
        (``GitHub Dark``); matching is case-insensitive.

    Returns
    -------
    Theme
        Matching theme.

    Raises
    ------
    ValueError
        If ``value`` does not name a bundled theme.
    """
    if isinstance(value, Theme):
        return value
    key = value.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    for theme in Theme:
        if key in {theme.value, display_name(theme).lower()}:
            return theme
    choices = ", ".join(theme.value for theme in Theme)
    raise ValueError(f"Unknown theme '{value}'. Expected one of: {choices}.")
