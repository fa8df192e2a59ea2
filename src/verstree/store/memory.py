"""In-memory version store."""

from datetime import datetime

from ..errors import VersionNotFoundError
from ..models import VersionSnapshot


class InMemoryVersionStore:
    """VersionStore kept in a dict, ordered by first insertion."""

    def __init__(self) -> None:
        # identity -> [(content, timestamp)], oldest first
        self._history: dict[str, list[tuple[str, datetime]]] = {}

    def add_version(
        self, file_identity: str, content: str, timestamp: datetime | None = None
    ) -> int:
        """Append a snapshot and return its 1-based version number."""
        entries = self._history.setdefault(file_identity, [])
        entries.append((content, timestamp or datetime.now()))
        return len(entries)

    def get_all_versioned_files(self) -> list[str]:
        return list(self._history)

    def get_all_versions(self, file_identity: str) -> list[str]:
        entries = self._history.get(file_identity, [])
        return [content for content, _ in reversed(entries)]

    def get_version_timestamp(self, file_identity: str, index: int) -> datetime:
        return self.get_snapshot(file_identity, index).timestamp

    def get_snapshot(self, file_identity: str, index: int) -> VersionSnapshot:
        """Return the snapshot at `index` (0 = newest)."""
        entries = self._history.get(file_identity)
        if not entries:
            raise VersionNotFoundError(f"File is not tracked: {file_identity}")
        if not 0 <= index < len(entries):
            raise VersionNotFoundError(
                f"Version index {index} out of range for {file_identity} ({len(entries)} versions)"
            )
        content, timestamp = entries[len(entries) - 1 - index]
        return VersionSnapshot(content=content, timestamp=timestamp, index=index)
