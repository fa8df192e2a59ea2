"""Log command implementation."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from ..core import build_version_list, order_for_display, version_description
from ..errors import VerstreeError
from ..output import get_output_context
from ..store import identity_for
from .common import require_store


def log(
    file: Path = typer.Argument(..., help="Tracked file"),
) -> None:
    """List the recorded versions of a file with their diff stats."""
    ctx = get_output_context()
    store, config = require_store(ctx)

    identity = identity_for(file)
    try:
        descriptors = build_version_list(store, identity)
    except VerstreeError as e:
        ctx.error(str(e), {"file": str(file)})
        raise typer.Exit(1) from None
    if not descriptors:
        ctx.error(f"No versions recorded for {file}")
        raise typer.Exit(1)

    table = Table(title=escape(str(file)))
    table.add_column("Version", justify="right")
    table.add_column("Recorded")
    table.add_column("Changes")
    for descriptor in order_for_display(descriptors, config.display.order):
        table.add_row(
            str(descriptor.version_number),
            descriptor.timestamp.strftime(config.display.timestamp_format),
            version_description(descriptor),
        )

    ctx.result(
        {"identity": identity, "versions": [d.model_dump(mode="json") for d in descriptors]},
        table,
    )
