"""Debounced, incremental place-search client."""

__version__ = "0.1.0"
