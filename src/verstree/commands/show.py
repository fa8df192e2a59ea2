"""Show command implementation."""

from pathlib import Path

import typer

from ..core import version_index
from ..errors import VerstreeError
from ..output import get_output_context
from ..store import identity_for
from .common import require_store


def show(
    file: Path = typer.Argument(..., help="Tracked file"),
    version: int | None = typer.Option(
        None, "--version", "-n", help="Version number (defaults to latest)"
    ),
) -> None:
    """Print the stored text of one version of a file."""
    ctx = get_output_context()
    store, _ = require_store(ctx)

    identity = identity_for(file)
    try:
        total = len(store.get_all_versions(identity))
        index = 0 if version is None else version_index(total, version)
        snapshot = store.get_snapshot(identity, index)
    except VerstreeError as e:
        ctx.error(str(e), {"file": str(file)})
        raise typer.Exit(1) from None

    if ctx.json_mode:
        ctx.print_json(
            {
                "identity": identity,
                "version": total - index,
                "timestamp": snapshot.timestamp.isoformat(),
                "content": snapshot.content,
            }
        )
    else:
        typer.echo(snapshot.content, nl=False)
