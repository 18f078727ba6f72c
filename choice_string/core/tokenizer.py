"""Splitting selection strings into tokens and reading each token as a range."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterator, NamedTuple

from choice_string.core.config import ParserConfig
from choice_string.core.errors import (
    InvalidTokenError,
    ReversedRangeError,
    ZeroOrNegativeIndexError,
)
from choice_string.core.ranges import Range

_DIGITS = re.compile(r"[0-9]+")
# A number or range with a leading minus sign, e.g. "-3" or "-3-5"
_NEGATIVE = re.compile(r"-[0-9]+(?:-[0-9]+)?")


class Token(NamedTuple):
    """A delimiter-free chunk of the input and where it starts."""

    text: str
    position: int


@lru_cache(maxsize=32)
def _token_pattern(delimiters: str) -> re.Pattern[str]:
    return re.compile(f"[^{re.escape(delimiters)}]+")


def iter_tokens(text: str, config: ParserConfig) -> Iterator[Token]:
    """
    Yield the tokens of ``text`` left to right.

    Runs of delimiters of any length and mix separate tokens. Leading and
    trailing delimiters produce nothing, so the tokens are never empty.
    """
    for match in _token_pattern(config.delimiters).finditer(text):
        yield Token(match.group(), match.start())


def read_token(token: Token, config: ParserConfig) -> Range:
    """
    Interpret a single token as ``N`` or ``N-M``.

    Args:
        token: The token to interpret
        config: Parser configuration supplying the index bound

    Returns:
        ``Range(N, N)`` for a single index, ``Range(N, M)`` for a range

    Raises:
        InvalidTokenError: Non-numeric text, a missing side, or a value
            larger than ``config.max_index``
        ZeroOrNegativeIndexError: A zero or negative value
        ReversedRangeError: A range with ``N > M``
    """
    text, position = token
    head, dash, tail = text.partition("-")

    if not dash:
        if not _DIGITS.fullmatch(text):
            raise InvalidTokenError(text, "non-numeric", position)
        value = _read_index(text, token, config)
        return Range(value, value)

    if not head:
        if _NEGATIVE.fullmatch(text):
            raise ZeroOrNegativeIndexError(text, position)
        reason = "empty side" if text == "-" else "non-numeric"
        raise InvalidTokenError(text, reason, position)

    if not _DIGITS.fullmatch(head):
        raise InvalidTokenError(text, "non-numeric", position)
    if not tail:
        raise InvalidTokenError(text, "empty side", position)
    if tail.startswith("-") and _DIGITS.fullmatch(tail[1:]):
        raise ZeroOrNegativeIndexError(text, position)
    if not _DIGITS.fullmatch(tail):
        raise InvalidTokenError(text, "non-numeric", position)

    start = _read_index(head, token, config)
    end = _read_index(tail, token, config)
    if start > end:
        raise ReversedRangeError(text, start, end, position)
    return Range(start, end)


def _read_index(digits: str, token: Token, config: ParserConfig) -> int:
    """Convert an ASCII digit string to an index within ``1..max_index``."""
    significant = digits.lstrip("0")
    # Length check first so oversized literals never reach int()
    if len(significant) > len(str(config.max_index)):
        raise InvalidTokenError(token.text, "overflow", token.position)

    value = int(significant or "0")
    if value == 0:
        raise ZeroOrNegativeIndexError(token.text, token.position)
    if value > config.max_index:
        raise InvalidTokenError(token.text, "overflow", token.position)
    return value
