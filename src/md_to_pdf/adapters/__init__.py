"""Adapters binding application ports to concrete renderers."""
