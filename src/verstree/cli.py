"""verstree CLI: browse file version history with line diff stats."""

from pathlib import Path

import typer
from rich.console import Console

from verstree import __version__

from .commands import diffstat, init, log, record, restore, show, tree
from .logging import configure_logging
from .output import OutputContext, set_output_context
from .store_dir import set_store_dir


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"verstree {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="verstree",
    help="Track text file versions and browse them by recency with diff stats",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    store: Path | None = typer.Option(
        None,
        "--store",
        help="Store directory (defaults to ./.verstree)",
    ),
) -> None:
    """verstree - per-file version history browser."""
    configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    set_output_context(
        OutputContext(console=Console(no_color=no_color, soft_wrap=True), json_mode=json_output)
    )
    set_store_dir(store)


app.command()(init)
app.command()(record)
app.command()(tree)
app.command()(log)
app.command()(show)
app.command()(diffstat)
app.command()(restore)


if __name__ == "__main__":
    app()
