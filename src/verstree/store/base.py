"""Version store contract consumed by the hierarchy builder."""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class VersionStore(Protocol):
    """Append-only per-file history of text snapshots.

    Versions are always returned newest first: index 0 is the latest.
    """

    def get_all_versioned_files(self) -> list[str]:
        """Return every tracked file identity in the store's native order."""
        ...

    def get_all_versions(self, file_identity: str) -> list[str]:
        """Return snapshot contents newest first, or [] for an untracked file."""
        ...

    def get_version_timestamp(self, file_identity: str, index: int) -> datetime:
        """Return when version `index` was recorded.

        Raises:
            VersionNotFoundError: If the file or index is unknown
        """
        ...
