"""Duplicate status ordinal and the weakest-link aggregation rule."""

from enum import IntEnum
from typing import Iterable, Optional


class DuplicateStatus(IntEnum):
    """Graded verdict that two values denote the same entity attribute.

    Members are ordered by ascending confidence. ``NULL_DUPLICATE_STATUS`` is a
    sentinel meaning the comparison could not be performed (e.g. empty input);
    it is never a comparison result and is distinct from ``NON_DUPLICATE``.

    The integer codes are a published contract and must not change.
    """
    NULL_DUPLICATE_STATUS = 0
    NON_DUPLICATE = 1
    POSSIBLE_DUPLICATE_NEEDS_REVIEW = 2
    LIKELY_DUPLICATE = 3
    EXACT_DUPLICATE = 4

    @property
    def is_null(self) -> bool:
        return self is DuplicateStatus.NULL_DUPLICATE_STATUS

    @property
    def is_duplicate(self) -> bool:
        """True for LIKELY and EXACT verdicts."""
        return self >= DuplicateStatus.LIKELY_DUPLICATE


def weakest_link(
    left: DuplicateStatus,
    right: DuplicateStatus
) -> DuplicateStatus:
    """Combine two statuses, ignoring NULL unless both are NULL."""
    if left.is_null:
        return right
    if right.is_null:
        return left
    return min(left, right)


def aggregate(statuses: Iterable[Optional[DuplicateStatus]]) -> DuplicateStatus:
    """
    Aggregate per-field statuses into one overall status.

    The result is the least confident non-NULL status. NULL is returned when
    nothing contributed or every contribution is NULL. ``None`` entries are
    skipped (a field that contributes nothing).

    Args:
        statuses: Per-field statuses in any order

    Returns:
        Overall status
    """
    result = DuplicateStatus.NULL_DUPLICATE_STATUS
    for status in statuses:
        if status is None:
            continue
        result = weakest_link(result, DuplicateStatus(status))
    return result
