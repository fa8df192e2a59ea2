"""Locating and opening the .verstree store directory."""

from pathlib import Path

from .config import VerstreeConfig, load_config
from .constants import STORE_DIR_NAME
from .errors import VerstreeError
from .store import FileVersionStore

# Set by the --store global option
_store_dir_override: Path | None = None


def set_store_dir(path: Path | None) -> None:
    """Override the store directory for this process. Called by CLI main callback."""
    global _store_dir_override
    _store_dir_override = path


def get_store_dir(base: Path | None = None) -> Path:
    """Get the .verstree directory path.

    Args:
        base: Directory containing .verstree, defaults to the working directory

    Returns:
        The --store override if set, otherwise base/.verstree
    """
    if _store_dir_override is not None:
        return _store_dir_override
    if base is None:
        base = Path.cwd()
    return base / STORE_DIR_NAME


def open_store(store_dir: Path | None = None) -> tuple[FileVersionStore, VerstreeConfig]:
    """Load config and open the file store.

    Raises:
        VerstreeError: If the store directory has not been initialized
        ConfigError: If config.toml is invalid
    """
    if store_dir is None:
        store_dir = get_store_dir()
    if not store_dir.is_dir():
        raise VerstreeError(f"No store at {store_dir}. Run 'verstree init' first.")
    config = load_config(store_dir)
    return FileVersionStore(store_dir, max_versions=config.store.max_versions), config
