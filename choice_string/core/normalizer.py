"""Interval union of raw selection ranges."""

from __future__ import annotations

from typing import Iterable, Union

from choice_string.core.ranges import Range

RangeLike = Union[Range, tuple[int, int]]


def merge_ranges(ranges: Iterable[RangeLike]) -> list[Range]:
    """
    Reduce ranges to the smallest equivalent list of disjoint ranges.

    Ranges that overlap or touch (``end + 1 == next start``) are merged.
    Input order, duplicates and fully contained ranges do not matter.

    Args:
        ranges: Ranges or ``(start, end)`` pairs, in any order

    Returns:
        Disjoint, non-adjacent ranges sorted ascending

    Examples:
        >>> merge_ranges([(5, 8), (1, 1), (3, 3), (6, 6)])
        [Range(start=1, end=1), Range(start=3, end=3), Range(start=5, end=8)]
        >>> merge_ranges([(1, 5), (11, 11), (4, 5), (6, 6)])
        [Range(start=1, end=6), Range(start=11, end=11)]
    """
    ordered = sorted(Range.validated(start, end) for start, end in ranges)
    if not ordered:
        return []

    merged: list[Range] = []
    current = ordered[0]
    for candidate in ordered[1:]:
        if candidate.start <= current.end + 1:
            if candidate.end > current.end:
                current = Range(current.start, candidate.end)
        else:
            merged.append(current)
            current = candidate

    merged.append(current)
    return merged
