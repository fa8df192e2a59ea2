"""Approximate line diff statistics.

Lines are aligned with a greedy two-cursor scan. On a mismatch the scan looks
up to LOOKAHEAD_WINDOW lines ahead, first in the current version and then in
the previous one, for the line the other side is waiting on. Anything skipped
over is counted as added or removed. If neither side resynchronizes, the pair
is counted as one substitution (one added, one removed).

This is not a minimal edit script. It runs in linear time and is meant for
badges like "+3 -1", so existing stats must stay stable: do not replace it with
an LCS diff.
"""

from collections.abc import Sequence

from ..constants import LOOKAHEAD_WINDOW
from ..models import DiffStats


def split_lines(text: str) -> list[str]:
    """Split text on newlines.

    Empty text gives [""] and a trailing newline gives a trailing "".
    """
    return text.split("\n")


def _find_ahead(lines: Sequence[str], start: int, target: str) -> int | None:
    """Return the first position in lines[start+1 : start+1+window] equal to target."""
    stop = min(start + LOOKAHEAD_WINDOW + 1, len(lines))
    for pos in range(start + 1, stop):
        if lines[pos] == target:
            return pos
    return None


def estimate(current_lines: Sequence[str], previous_lines: Sequence[str]) -> DiffStats:
    """Estimate lines added and removed going from previous_lines to current_lines.

    Args:
        current_lines: Lines of the newer version
        previous_lines: Lines of the older version

    Returns:
        DiffStats with non-negative added/removed counts
    """
    added = 0
    removed = 0
    i = 0
    j = 0
    n_current = len(current_lines)
    n_previous = len(previous_lines)

    while i < n_current or j < n_previous:
        if i >= n_current:
            removed += n_previous - j
            break
        if j >= n_previous:
            added += n_current - i
            break

        if current_lines[i] == previous_lines[j]:
            i += 1
            j += 1
            continue

        # Current side first: ambiguous cases resolve as additions
        match = _find_ahead(current_lines, i, previous_lines[j])
        if match is not None:
            added += match - i
            i = match
            continue

        match = _find_ahead(previous_lines, j, current_lines[i])
        if match is not None:
            removed += match - j
            j = match
            continue

        added += 1
        removed += 1
        i += 1
        j += 1

    return DiffStats(added=added, removed=removed)


def estimate_text(current: str, previous: str) -> DiffStats:
    """Estimate diff stats between two text blobs."""
    return estimate(split_lines(current), split_lines(previous))
