"""Core parsing and normalization modules."""

from choice_string.core.config import DEFAULT_CONFIG, ParserConfig
from choice_string.core.errors import (
    InvalidTokenError,
    ParseError,
    ReversedRangeError,
    ZeroOrNegativeIndexError,
)
from choice_string.core.normalizer import merge_ranges
from choice_string.core.ranges import Range
from choice_string.core.selection import Selection
from choice_string.core.parser import parse, parse_raw

__all__ = [
    "DEFAULT_CONFIG",
    "ParserConfig",
    "ParseError",
    "InvalidTokenError",
    "ReversedRangeError",
    "ZeroOrNegativeIndexError",
    "Range",
    "Selection",
    "merge_ranges",
    "parse",
    "parse_raw",
]
