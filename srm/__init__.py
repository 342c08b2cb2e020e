"""Move files to a trash directory instead of unlinking them."""

__version__ = "0.1.0"
