"""Text shown for groups, files and versions in the history tree."""

from collections.abc import Sequence
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

from ..config import DisplayOrder
from ..models import DateGroup, VersionDescriptor
from ..store.filesystem import path_for

LANGUAGE_LABELS = {
    ".js": "JS",
    ".mjs": "JS",
    ".cjs": "JS",
    ".ts": "TS",
    ".py": "PY",
    ".java": "JAVA",
    ".html": "HTML",
    ".htm": "HTML",
    ".css": "CSS",
    ".json": "JSON",
    ".md": "MD",
}
DEFAULT_LANGUAGE_LABEL = "TXT"

INITIAL_VERSION_DESCRIPTION = "Initial version"


def group_description(group: DateGroup) -> str:
    """File count badge for a recency group, e.g. "1 file" or "3 files"."""
    count = len(group.files)
    return f"{count} file{'' if count == 1 else 's'}"


def language_label(file_identity: str) -> str:
    """Short language badge derived from the file suffix."""
    suffix = PurePosixPath(urlparse(file_identity).path or file_identity).suffix.lower()
    return LANGUAGE_LABELS.get(suffix, DEFAULT_LANGUAGE_LABEL)


def display_path(file_identity: str, base: Path | None = None) -> str:
    """Path of a tracked file, relative to base when it lies inside it."""
    path = path_for(file_identity)
    if base is not None:
        try:
            return path.relative_to(base.resolve()).as_posix()
        except ValueError:
            pass
    return str(path)


def version_label(descriptor: VersionDescriptor, timestamp_format: str) -> str:
    """Label like "Version 3 - 2024-06-15 09:00:00"."""
    timestamp = descriptor.timestamp.strftime(timestamp_format)
    return f"Version {descriptor.version_number} - {timestamp}"


def version_description(descriptor: VersionDescriptor) -> str:
    """Diff badge like "+2 -1", or "Initial version" for the oldest version."""
    if descriptor.is_initial or descriptor.diff_stats is None:
        return INITIAL_VERSION_DESCRIPTION
    return str(descriptor.diff_stats)


def order_for_display(
    descriptors: Sequence[VersionDescriptor], order: DisplayOrder
) -> list[VersionDescriptor]:
    """Reorder a newest-first listing for display."""
    if order == DisplayOrder.OLDEST:
        return list(reversed(descriptors))
    return list(descriptors)
