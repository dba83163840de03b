"""Command-line tools for nested en/fr translation dictionaries."""

__version__ = "0.1.0"
