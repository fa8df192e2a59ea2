"""verstree: browse per-file text version history with line diff stats."""

__version__ = "0.1.0"
