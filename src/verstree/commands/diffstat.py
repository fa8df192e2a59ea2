"""Diffstat command implementation."""

from pathlib import Path

import typer
from rich.markup import escape

from ..core import build_version_list, estimate_text, version_description, version_index
from ..errors import VersionNotFoundError, VerstreeError
from ..output import get_output_context
from ..store import identity_for
from .common import read_text_file, require_store


def diffstat(
    file: Path = typer.Argument(..., help="Tracked file, or the newer file with --against"),
    version: int | None = typer.Option(
        None, "--version", "-n", help="Version number (defaults to latest)"
    ),
    against: Path | None = typer.Option(
        None, "--against", "-a", help="Compare FILE to this older file instead of the store"
    ),
) -> None:
    """Show lines added and removed by a version, or between two files."""
    ctx = get_output_context()

    if against is not None:
        stats = estimate_text(read_text_file(ctx, file), read_text_file(ctx, against))
        names = f"{escape(str(file))} vs {escape(str(against))}"
        ctx.result(
            {"current": str(file), "previous": str(against), **stats.model_dump()},
            f"{names}: [green]+{stats.added}[/green] [red]-{stats.removed}[/red]",
        )
        return

    store, _ = require_store(ctx)
    identity = identity_for(file)
    try:
        descriptors = build_version_list(store, identity)
        if not descriptors:
            raise VersionNotFoundError(f"No versions recorded for {file}")
        index = 0 if version is None else version_index(len(descriptors), version)
    except VerstreeError as e:
        ctx.error(str(e), {"file": str(file)})
        raise typer.Exit(1) from None
    descriptor = descriptors[index]

    stats = descriptor.diff_stats
    ctx.result(
        {
            "identity": identity,
            "version": descriptor.version_number,
            "diff_stats": stats.model_dump() if stats else None,
        },
        f"{escape(str(file))} version {descriptor.version_number}: "
        f"{version_description(descriptor)}",
    )
