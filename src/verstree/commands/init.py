"""Init command implementation."""

import typer

from ..config import write_config_template
from ..constants import CONFIG_FILENAME, HISTORY_DIR_NAME
from ..output import get_output_context
from ..store_dir import get_store_dir


def init() -> None:
    """Create the .verstree store in the current directory."""
    ctx = get_output_context()
    store_dir = get_store_dir()
    config_path = store_dir / CONFIG_FILENAME

    try:
        (store_dir / HISTORY_DIR_NAME).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        ctx.error(f"Cannot create {store_dir}: {e}")
        raise typer.Exit(1) from None

    if not config_path.exists():
        write_config_template(store_dir)
        ctx.print(f"[green]Created config template:[/green] {config_path}")
    else:
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")

    ctx.success("verstree initialized", {"store": str(store_dir)})
