"""Line-level diff summary between two versions of a file."""

from pydantic import BaseModel, ConfigDict, Field


class DiffStats(BaseModel):
    """Approximate count of added and removed lines.

    Attributes:
        added: Lines present in the current version but not matched in the previous
        removed: Lines present in the previous version but not matched in the current
    """

    model_config = ConfigDict(frozen=True)

    added: int = Field(default=0, ge=0, description="Lines added")
    removed: int = Field(default=0, ge=0, description="Lines removed")

    def __str__(self) -> str:
        return f"+{self.added} -{self.removed}"
