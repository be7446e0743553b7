"""Shared pytest configuration and marker assignment."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


SAMPLE_MARKDOWN = """\
# Quarterly report

Some *emphasis*, a `code span` and a [link](https://example.com/docs).

> quoted text

- first
- second

```python
print("hello")
```

| Name | Value |
| ---- | ----- |
| a    | 1     |
"""


@pytest.fixture
def scratch_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect temporary files into an isolated, inspectable directory."""
    directory = tmp_path / "scratch"
    directory.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(directory))
    return directory


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    """Write a Markdown document covering the common feature set."""
    path = tmp_path / "docs" / "report.md"
    path.parent.mkdir(parents=True)
    path.write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    return path
