"""Recency grouping models."""

from enum import Enum

from pydantic import BaseModel, Field


class RecencyBucket(str, Enum):
    """Calendar-day recency buckets, declared in display priority order."""

    TODAY = "Today"
    YESTERDAY = "Yesterday"
    LAST_7_DAYS = "Last 7 Days"
    LAST_30_DAYS = "Last 30 Days"
    MORE = "More"


class DateGroup(BaseModel):
    """Tracked files whose latest version falls in one recency bucket."""

    label: RecencyBucket
    files: list[str] = Field(default_factory=list)
