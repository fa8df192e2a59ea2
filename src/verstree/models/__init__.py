"""Pydantic data models for verstree.

- Diff summaries (DiffStats)
- Stored snapshots and their on-disk metadata (VersionSnapshot, VersionMeta)
- Per-version listing entries (VersionDescriptor)
- Recency grouping (RecencyBucket, DateGroup)
"""

from .diff_stats import DiffStats
from .groups import DateGroup, RecencyBucket
from .version import VersionDescriptor, VersionMeta, VersionSnapshot

__all__ = [
    "DateGroup",
    "DiffStats",
    "RecencyBucket",
    "VersionDescriptor",
    "VersionMeta",
    "VersionSnapshot",
]
