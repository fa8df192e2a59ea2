"""Tree command implementation."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.tree import Tree

from ..core import (
    build_root_groups,
    build_version_list,
    display_path,
    group_description,
    language_label,
    order_for_display,
    version_description,
    version_label,
)
from ..errors import VerstreeError
from ..output import get_output_context
from .common import require_store


def tree() -> None:
    """Show versioned files grouped by when they last changed."""
    ctx = get_output_context()
    store, config = require_store(ctx)
    display = config.display
    base = Path.cwd()

    try:
        groups = build_root_groups(store)
    except VerstreeError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None
    if not groups:
        ctx.result({"groups": []}, "No versioned files.")
        return

    root = Tree("[bold]Versioned files[/bold]")
    data = []
    for group in groups:
        group_node = root.add(
            f"[bold cyan]{group.label.value}[/bold cyan] [dim]{group_description(group)}[/dim]"
        )
        group_data = {"label": group.label.value, "files": []}

        for file_identity in group.files:
            try:
                descriptors = build_version_list(store, file_identity)
            except VerstreeError as e:
                ctx.error(str(e), {"identity": file_identity})
                raise typer.Exit(1) from None
            name = escape(display_path(file_identity, base))
            if display.show_language:
                name += f" [dim]{language_label(file_identity)}[/dim]"
            file_node = group_node.add(name)

            for descriptor in order_for_display(descriptors, display.order):
                label = escape(version_label(descriptor, display.timestamp_format))
                file_node.add(f"{label} [dim]{version_description(descriptor)}[/dim]")

            group_data["files"].append(
                {
                    "identity": file_identity,
                    "versions": [d.model_dump(mode="json") for d in descriptors],
                }
            )
        data.append(group_data)

    ctx.result({"groups": data}, root)
