"""Record command implementation."""

import logging
from pathlib import Path

import typer
from rich.markup import escape

from ..errors import StoreError
from ..output import get_output_context
from ..store import identity_for
from .common import read_text_file, require_store

logger = logging.getLogger(__name__)


def record(
    files: list[Path] = typer.Argument(..., help="Files to snapshot"),
) -> None:
    """Record the current text of one or more files as new versions."""
    ctx = get_output_context()
    store, _ = require_store(ctx)

    recorded = []
    for path in files:
        content = read_text_file(ctx, path)
        identity = identity_for(path)
        try:
            version = store.record(identity, content)
        except StoreError as e:
            ctx.error(str(e), {"file": str(path)})
            raise typer.Exit(1) from None

        recorded.append({"file": str(path), "identity": identity, "version": version})
        if version:
            ctx.print(f"[green]Recorded[/green] {escape(str(path))} as version {version}")
        else:
            logger.info("%s unchanged since last version", path)

    ctx.print_json({"recorded": recorded})
