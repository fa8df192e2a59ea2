"""Core logic for verstree, with no I/O of its own.

- diff_estimator: bounded-lookahead line diff statistics
- hierarchy: recency groups and per-file version listings
- tree_labels: display text for groups, files and versions
"""

from .diff_estimator import estimate, estimate_text, split_lines
from .hierarchy import (
    EPOCH,
    build_root_groups,
    build_version_list,
    classify_recency,
    get_last_modified,
    version_index,
)
from .tree_labels import (
    display_path,
    group_description,
    language_label,
    order_for_display,
    version_description,
    version_label,
)

__all__ = [
    "EPOCH",
    "build_root_groups",
    "build_version_list",
    "classify_recency",
    "display_path",
    "estimate",
    "estimate_text",
    "get_last_modified",
    "group_description",
    "language_label",
    "order_for_display",
    "split_lines",
    "version_description",
    "version_index",
    "version_label",
]
