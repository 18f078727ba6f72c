"""Tests for merging raw ranges."""

import random

import pytest

from choice_string.core.normalizer import merge_ranges
from choice_string.core.ranges import Range


def covered(ranges):
    """Brute-force set of integers covered by some ranges."""
    return {i for start, end in ranges for i in range(start, end + 1)}


def random_ranges(rng, count, limit=60):
    result = []
    for _ in range(count):
        start = rng.randint(1, limit)
        result.append((start, start + rng.choice([0, 0, 1, 2, 5, 10])))
    return result


class TestMergeRanges:
    """Tests for merge_ranges."""

    def test_empty(self):
        """No ranges merge to nothing."""
        assert merge_ranges([]) == []

    def test_single(self):
        """A single range is already minimal."""
        assert merge_ranges([(4, 9)]) == [Range(4, 9)]

    def test_returns_range_objects(self):
        """Plain tuples come back as Range."""
        assert all(isinstance(r, Range) for r in merge_ranges([(1, 2), (7, 7)]))

    def test_sorts(self):
        """Output is sorted by start."""
        assert merge_ranges([(9, 9), (1, 1), (5, 5)]) == [(1, 1), (5, 5), (9, 9)]

    def test_adjacent_merged(self):
        """Touching ranges are merged."""
        assert merge_ranges([(1, 3), (4, 6)]) == [(1, 6)]

    def test_gap_kept(self):
        """A gap of one index keeps ranges apart."""
        assert merge_ranges([(1, 3), (5, 6)]) == [(1, 3), (5, 6)]

    def test_overlap_merged(self):
        """Overlapping ranges are merged."""
        assert merge_ranges([(1, 5), (3, 7)]) == [(1, 7)]

    def test_contained_absorbed(self):
        """A range inside another disappears."""
        assert merge_ranges([(1, 5), (2, 3)]) == [(1, 5)]

    def test_duplicates_absorbed(self):
        """Duplicates merge away."""
        assert merge_ranges([(2, 2), (2, 2), (2, 2)]) == [(2, 2)]

    def test_singles_and_range(self):
        """Singles inside and next to a range fold into it."""
        result = merge_ranges([(1, 1), (3, 3), (5, 9), (8, 8), (10, 10)])
        assert result == [(1, 1), (3, 3), (5, 10)]

    def test_bridging_range(self):
        """A later range can join two earlier ones."""
        result = merge_ranges([(1, 1), (3, 3), (5, 9), (11, 20), (10, 10)])
        assert result == [(1, 1), (3, 3), (5, 20)]

    def test_long_range_swallows_later_starts(self):
        """An early wide range covers later, shorter ones."""
        assert merge_ranges([(1, 100), (5, 6), (50, 60), (101, 101)]) == [(1, 101)]

    def test_accepts_generator(self):
        """Any iterable of pairs is accepted."""
        assert merge_ranges((r for r in [(2, 3), (1, 1)])) == [(1, 3)]

    def test_rejects_reversed(self):
        """Reversed input is a caller bug."""
        with pytest.raises(ValueError):
            merge_ranges([(1, 2), (5, 3)])

    def test_rejects_zero(self):
        """Index 0 is a caller bug."""
        with pytest.raises(ValueError):
            merge_ranges([(0, 2)])


class TestMergeProperties:
    """Algebraic properties over seeded random inputs."""

    @pytest.mark.parametrize("seed", range(25))
    def test_union_correct(self, seed):
        """Merged output covers exactly the union of the input."""
        raw = random_ranges(random.Random(seed), 12)
        assert covered(merge_ranges(raw)) == covered(raw)

    @pytest.mark.parametrize("seed", range(25))
    def test_minimal(self, seed):
        """No two output ranges overlap or touch."""
        merged = merge_ranges(random_ranges(random.Random(seed), 12))
        for a, b in zip(merged, merged[1:]):
            assert a.end < b.start - 1

    @pytest.mark.parametrize("seed", range(25))
    def test_idempotent(self, seed):
        """Merging merged output changes nothing."""
        merged = merge_ranges(random_ranges(random.Random(seed), 12))
        assert merge_ranges(merged) == merged

    @pytest.mark.parametrize("seed", range(25))
    def test_order_independent(self, seed):
        """Any permutation of the input merges the same way."""
        rng = random.Random(seed)
        raw = random_ranges(rng, 12)
        shuffled = list(raw)
        rng.shuffle(shuffled)
        assert merge_ranges(shuffled) == merge_ranges(raw)
