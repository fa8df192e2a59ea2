"""Allow running verstree as a module."""

from .cli import app

app()
