"""Applying a selection to a concrete numbered list."""

from __future__ import annotations

from typing import Sequence, TypeVar

from choice_string.core.ranges import Range
from choice_string.core.selection import Selection

T = TypeVar("T")


def to_indices(selection: Selection, total: int) -> list[int]:
    """
    Map a selection onto 0-based indices of a list with ``total`` entries.

    Args:
        selection: Parsed selection (1-based)
        total: Number of entries in the list

    Returns:
        Sorted list of 0-based indices; selected indices past the end of
        the list are left out

    Examples:
        >>> to_indices(Selection.parse("1-3, 7-9"), 8)
        [0, 1, 2, 6, 7]
        >>> to_indices(Selection.parse("2-1000000"), 3)
        [1, 2]
    """
    _check_total(total)
    indices: list[int] = []
    for r in selection.ranges():
        if r.start > total:
            break
        indices.extend(range(r.start - 1, min(r.end, total)))
    return indices


def pick(items: Sequence[T], selection: Selection) -> list[T]:
    """Return the entries of ``items`` whose 1-based position is selected."""
    return [items[i] for i in to_indices(selection, len(items))]


def out_of_range(selection: Selection, total: int) -> Selection:
    """
    The part of a selection that lies past the end of a ``total``-entry list.

    Useful for warning the user that some of what they typed matched nothing.
    """
    _check_total(total)
    return Selection(
        Range(max(r.start, total + 1), r.end)
        for r in selection.ranges()
        if r.end > total
    )


def _check_total(total: int) -> None:
    if total < 0:
        raise ValueError(f"List size cannot be negative, got {total}")
