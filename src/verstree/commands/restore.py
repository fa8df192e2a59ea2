"""Restore command implementation."""

import logging
from pathlib import Path

import typer

from ..core import version_index
from ..errors import VerstreeError
from ..output import get_output_context
from ..store import identity_for
from .common import read_text_file, require_store

logger = logging.getLogger(__name__)


def restore(
    file: Path = typer.Argument(..., help="Tracked file"),
    version: int = typer.Option(..., "--version", "-n", help="Version number to restore"),
) -> None:
    """Write a stored version back to the working file.

    The current text is recorded first, so nothing is lost.
    """
    ctx = get_output_context()
    store, _ = require_store(ctx)

    identity = identity_for(file)
    try:
        index = version_index(len(store.get_all_versions(identity)), version)
        snapshot = store.get_snapshot(identity, index)
        if file.exists():
            saved = store.record(identity, read_text_file(ctx, file))
            if saved:
                logger.info("Saved current text of %s as version %d", file, saved)
    except VerstreeError as e:
        ctx.error(str(e), {"file": str(file)})
        raise typer.Exit(1) from None

    try:
        file.write_bytes(snapshot.content.encode("utf-8"))
    except OSError as e:
        ctx.error(f"Cannot write {file}: {e}")
        raise typer.Exit(1) from None

    ctx.success(f"Restored {file} to version {version}", {"file": str(file), "version": version})
