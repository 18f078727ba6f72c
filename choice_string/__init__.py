"""
choice_string - Parse selection strings like "1 3 5 6-8" into index sets.

Meant for interactive tools that show a numbered list and let the user
pick entries by typing indices and ranges with loose punctuation.
"""

from choice_string.core.config import ParserConfig
from choice_string.core.errors import (
    InvalidTokenError,
    ParseError,
    ReversedRangeError,
    ZeroOrNegativeIndexError,
)
from choice_string.core.normalizer import merge_ranges
from choice_string.core.parser import parse, parse_raw
from choice_string.core.ranges import Range
from choice_string.core.selection import Selection
from choice_string.utils.indices import out_of_range, pick, to_indices

__version__ = "0.1.0"

__all__ = [
    "InvalidTokenError",
    "ParseError",
    "ParserConfig",
    "Range",
    "ReversedRangeError",
    "Selection",
    "ZeroOrNegativeIndexError",
    "merge_ranges",
    "out_of_range",
    "parse",
    "parse_raw",
    "pick",
    "to_indices",
    "__version__",
]
