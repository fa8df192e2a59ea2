"""Helpers shared by command implementations."""

from pathlib import Path

import typer

from ..config import VerstreeConfig
from ..errors import VerstreeError
from ..output import OutputContext
from ..store import FileVersionStore
from ..store_dir import open_store


def require_store(ctx: OutputContext) -> tuple[FileVersionStore, VerstreeConfig]:
    """Open the store or exit with code 1."""
    try:
        return open_store()
    except VerstreeError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None


def read_text_file(ctx: OutputContext, path: Path) -> str:
    """Read a working file as UTF-8 text or exit with code 1."""
    if not path.is_file():
        ctx.error(f"File not found: {path}")
        raise typer.Exit(1)
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError:
        ctx.error(f"Not a UTF-8 text file: {path}")
        raise typer.Exit(1) from None
