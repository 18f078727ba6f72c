"""The canonical, immutable result of parsing a selection string."""

from __future__ import annotations

from bisect import bisect_right
from typing import TYPE_CHECKING, Iterable, Iterator

from choice_string.core.normalizer import RangeLike, merge_ranges
from choice_string.core.ranges import Range

if TYPE_CHECKING:
    from choice_string.core.config import ParserConfig


class Selection:
    """
    A finite set of positive indices stored as merged inclusive ranges.

    The ranges are sorted, disjoint and never adjacent, so two selections
    describing the same set always compare equal. Membership is answered by
    binary search over the ranges; the selected indices are only ever
    produced lazily, so a selection like ``1-1000000`` stays small.

    Examples:
        >>> sel = Selection.parse("1 3 5 6-8")
        >>> sel.ranges()
        [Range(start=1, end=1), Range(start=3, end=3), Range(start=5, end=8)]
        >>> sel.contains_item(7), sel.contains_item(4)
        (True, False)
        >>> str(sel)
        '1, 3, 5-8'
    """

    __slots__ = ("_ranges", "_starts")

    def __init__(self, ranges: Iterable[RangeLike] = ()) -> None:
        merged = tuple(merge_ranges(ranges))
        object.__setattr__(self, "_ranges", merged)
        object.__setattr__(self, "_starts", tuple(r.start for r in merged))

    @classmethod
    def parse(cls, text: str, config: ParserConfig | None = None) -> Selection:
        """Parse a selection string. See :func:`choice_string.parse`."""
        from choice_string.core.parser import parse

        return parse(text, config)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def contains_item(self, item: object) -> bool:
        """
        Check whether ``item`` is one of the selected indices.

        Anything that is not an integer is never selected.
        """
        if isinstance(item, bool) or not isinstance(item, int):
            return False
        idx = bisect_right(self._starts, item) - 1
        if idx < 0:
            return False
        return self._ranges[idx].contains(item)

    def __contains__(self, item: object) -> bool:
        return self.contains_item(item)

    def ranges(self) -> list[Range]:
        """The merged ranges, sorted ascending."""
        return list(self._ranges)

    def items(self) -> Iterator[int]:
        """Yield every selected index in ascending order."""
        for r in self._ranges:
            yield from range(r.start, r.end + 1)

    def __iter__(self) -> Iterator[int]:
        return self.items()

    def count(self) -> int:
        """Number of selected indices."""
        return sum(r.size for r in self._ranges)

    def __len__(self) -> int:
        # len() is capped at sys.maxsize; count() is not
        return self.count()

    @property
    def is_empty(self) -> bool:
        return not self._ranges

    def __bool__(self) -> bool:
        return bool(self._ranges)

    def first(self) -> int:
        """Smallest selected index."""
        if not self._ranges:
            raise ValueError("Empty selection has no first index")
        return self._ranges[0].start

    def last(self) -> int:
        """Largest selected index."""
        if not self._ranges:
            raise ValueError("Empty selection has no last index")
        return self._ranges[-1].end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selection):
            return NotImplemented
        return self._ranges == other._ranges

    def __hash__(self) -> int:
        return hash(self._ranges)

    def __str__(self) -> str:
        return ", ".join(str(r) for r in self._ranges)

    def __repr__(self) -> str:
        return f"Selection({str(self)!r})"
