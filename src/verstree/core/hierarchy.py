"""Recency grouping and per-file version listings.

Everything here is recomputed from the store on every call. Nothing is cached,
so callers simply call again after a new version is recorded.
"""

import logging
from datetime import date, datetime

from ..errors import VersionNotFoundError
from ..models import DateGroup, RecencyBucket, VersionDescriptor
from ..store.base import VersionStore
from .diff_estimator import estimate_text

logger = logging.getLogger(__name__)

# Last-modified time of a file with no versions
EPOCH = datetime(1970, 1, 1)


def _local_date(moment: datetime) -> date:
    """Calendar date of a timestamp in local time."""
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


def get_last_modified(store: VersionStore, file_identity: str) -> datetime:
    """Timestamp of a file's newest version, or EPOCH if it has none."""
    versions = store.get_all_versions(file_identity)
    if not versions:
        return EPOCH
    return store.get_version_timestamp(file_identity, 0)


def classify_recency(last_modified: datetime, now: datetime) -> RecencyBucket:
    """Place a timestamp in a recency bucket by calendar-day distance from now.

    Timestamps later than now count as Today.
    """
    days = (_local_date(now) - _local_date(last_modified)).days
    if days <= 0:
        return RecencyBucket.TODAY
    if days == 1:
        return RecencyBucket.YESTERDAY
    if days <= 7:
        return RecencyBucket.LAST_7_DAYS
    if days <= 30:
        return RecencyBucket.LAST_30_DAYS
    return RecencyBucket.MORE


def build_root_groups(store: VersionStore, now: datetime | None = None) -> list[DateGroup]:
    """Group tracked files by how recently they last changed.

    Args:
        store: Version store to read from
        now: Reference time, defaults to the current local time

    Returns:
        Non-empty groups in bucket priority order. Files keep the store's order.
    """
    if now is None:
        now = datetime.now()

    buckets: dict[RecencyBucket, list[str]] = {bucket: [] for bucket in RecencyBucket}
    for file_identity in store.get_all_versioned_files():
        bucket = classify_recency(get_last_modified(store, file_identity), now)
        buckets[bucket].append(file_identity)

    groups = [DateGroup(label=bucket, files=files) for bucket, files in buckets.items() if files]
    logger.debug("Built %d recency groups", len(groups))
    return groups


def build_version_list(store: VersionStore, file_identity: str) -> list[VersionDescriptor]:
    """List a file's versions newest first, each with stats against its predecessor.

    Args:
        store: Version store to read from
        file_identity: File to list

    Returns:
        One descriptor per version; [] for an untracked file. The oldest
        version has diff_stats None.
    """
    versions = store.get_all_versions(file_identity) or []
    total = len(versions)

    descriptors = []
    for index, content in enumerate(versions):
        diff_stats = None
        if index < total - 1:
            diff_stats = estimate_text(content, versions[index + 1])
        descriptors.append(
            VersionDescriptor(
                file_identity=file_identity,
                index=index,
                version_number=total - index,
                timestamp=store.get_version_timestamp(file_identity, index),
                diff_stats=diff_stats,
            )
        )
    return descriptors


def version_index(total_versions: int, version_number: int) -> int:
    """Convert a 1-based display version number to a store index.

    Raises:
        VersionNotFoundError: If the number is outside 1..total_versions
    """
    if not 1 <= version_number <= total_versions:
        raise VersionNotFoundError(
            f"Version {version_number} does not exist ({total_versions} versions)"
        )
    return total_versions - version_number
