"""Inclusive integer range value type."""

from __future__ import annotations

from typing import NamedTuple


class Range(NamedTuple):
    """
    An inclusive range of positive indices.

    A single selected index is a range with ``start == end``. Being a tuple,
    a Range compares equal to a plain ``(start, end)`` pair.
    """

    start: int
    end: int

    @classmethod
    def validated(cls, start: int, end: int) -> Range:
        """
        Build a Range, checking that it describes positive indices in order.

        Raises:
            TypeError: If either bound is not an integer
            ValueError: If ``start < 1`` or ``start > end``
        """
        for bound in (start, end):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise TypeError(f"Range bounds must be integers, got {bound!r}")
        if start < 1:
            raise ValueError(f"Range start must be at least 1, got {start}")
        if start > end:
            raise ValueError(f"Range start {start} is greater than end {end}")
        return cls(start, end)

    @property
    def size(self) -> int:
        """Number of indices covered."""
        return self.end - self.start + 1

    def contains(self, item: int) -> bool:
        return self.start <= item <= self.end

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"
