"""Configuration management for verstree."""

import tomllib
from enum import Enum
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILENAME
from .errors import ConfigError


class DisplayOrder(str, Enum):
    """Order in which a file's versions are listed."""

    NEWEST = "newest"
    OLDEST = "oldest"


class StoreConfig(BaseModel):
    """Configuration for the on-disk version store."""

    max_versions: int = Field(
        default=0, ge=0, description="Versions kept per file (0 keeps every version)"
    )


class DisplayConfig(BaseModel):
    """Configuration for tree and log rendering."""

    order: DisplayOrder = DisplayOrder.OLDEST
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    show_language: bool = True


class VerstreeConfig(BaseModel):
    """Root configuration for verstree."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def load_config(store_dir: Path) -> VerstreeConfig:
    """Load config from .verstree/config.toml.

    Args:
        store_dir: Path to .verstree directory

    Returns:
        Loaded configuration, or defaults if config.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = store_dir / CONFIG_FILENAME
    if not config_path.exists():
        return VerstreeConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return VerstreeConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def write_config_template(store_dir: Path) -> Path:
    """Write default config.toml template.

    Args:
        store_dir: Path to .verstree directory

    Returns:
        Path to the written config file
    """
    config_path = store_dir / CONFIG_FILENAME
    template = {
        "store": {"max_versions": 0},
        "display": {
            "order": DisplayOrder.OLDEST.value,
            "timestamp_format": "%Y-%m-%d %H:%M:%S",
            "show_language": True,
        },
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
