"""Version models for tracked files.

Index 0 is always the most recent version; higher indices are older.
Version numbers are 1-based for display, so the oldest version is "Version 1".
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .diff_stats import DiffStats


class VersionSnapshot(BaseModel):
    """One stored text snapshot of a file.

    Attributes:
        content: Full text of the file at this version
        timestamp: When the snapshot was recorded
        index: Position in the store, 0 = most recent
    """

    model_config = ConfigDict(frozen=True)

    content: str
    timestamp: datetime
    index: int = Field(ge=0)


class VersionDescriptor(BaseModel):
    """View of a single version, built fresh for every listing.

    Attributes:
        file_identity: Identity of the file the version belongs to
        index: Position in the store, 0 = most recent
        version_number: total versions - index (oldest is 1)
        timestamp: When the version was recorded
        diff_stats: Stats against the next older version, None for the oldest
    """

    file_identity: str
    index: int = Field(ge=0)
    version_number: int = Field(ge=1)
    timestamp: datetime
    diff_stats: DiffStats | None = None

    @property
    def is_initial(self) -> bool:
        """True for the oldest version, which has nothing to compare against."""
        return self.version_number == 1


class VersionMeta(BaseModel):
    """Metadata written next to each stored snapshot as meta.json."""

    version: int = Field(ge=1, description="Version number")
    file_identity: str = Field(description="Identity of the tracked file")
    created_at: datetime = Field(default_factory=datetime.now)
    sha256: str = Field(description="SHA256 of the snapshot content")
    line_count: int = Field(ge=0, description="Number of lines in the snapshot")
