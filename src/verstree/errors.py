"""verstree errors."""


class VerstreeError(Exception):
    """Base exception for verstree errors."""


class ConfigError(VerstreeError):
    """Raised when config.toml cannot be parsed or validated."""


class StoreError(VerstreeError):
    """Raised when the version store cannot be read or written."""


class VersionNotFoundError(StoreError):
    """Raised when a file identity or version index is not in the store."""
