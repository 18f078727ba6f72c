"""Parsing selection strings into selections."""

from __future__ import annotations

from choice_string.core.config import DEFAULT_CONFIG, ParserConfig
from choice_string.core.errors import ParseError
from choice_string.core.ranges import Range
from choice_string.core.selection import Selection
from choice_string.core.tokenizer import iter_tokens, read_token
from choice_string.utils.log import get_logger

log = get_logger(__name__)

NONE_LITERAL = "none"


def parse_raw(text: str, config: ParserConfig | None = None) -> list[Range]:
    """
    Parse a selection string without merging the resulting ranges.

    The ranges come back in the order their tokens appear, with duplicates
    and overlaps kept.

    Args:
        text: Selection string like "1 3 5 6-8" or "1, 2; 4-5"
        config: Parser configuration (default: :data:`DEFAULT_CONFIG`)

    Returns:
        One range per token

    Raises:
        TypeError: If ``text`` is not a string
        ParseError: For the first malformed token, left to right

    Examples:
        >>> parse_raw("8 9-12 4")
        [Range(start=8, end=8), Range(start=9, end=12), Range(start=4, end=4)]
        >>> parse_raw(" ;, ")
        []
    """
    if not isinstance(text, str):
        raise TypeError(f"Selection input must be a string, got {type(text).__name__}")
    config = config or DEFAULT_CONFIG

    tokens = list(iter_tokens(text, config))
    if (
        config.allow_none_literal
        and len(tokens) == 1
        and tokens[0].text.lower() == NONE_LITERAL
    ):
        return []

    ranges: list[Range] = []
    for token in tokens:
        try:
            ranges.append(read_token(token, config))
        except ParseError as e:
            log.debug(
                "selection_rejected",
                token=e.token,
                position=e.position,
                error=type(e).__name__,
            )
            raise
    return ranges


def parse(text: str, config: ParserConfig | None = None) -> Selection:
    """
    Parse a selection string into a merged :class:`Selection`.

    Tokens are positive indices (``5``) or inclusive ranges (``6-8``),
    separated by any run of spaces, tabs, commas and semicolons. Empty
    input, delimiters only, or the word ``none`` give an empty selection.

    Args:
        text: Selection string typed by the user
        config: Parser configuration (default: :data:`DEFAULT_CONFIG`)

    Returns:
        The selection, with overlapping and adjacent ranges merged

    Raises:
        TypeError: If ``text`` is not a string
        InvalidTokenError: Non-numeric token, missing range side, or overflow
        ReversedRangeError: A range like ``5-3``
        ZeroOrNegativeIndexError: Index ``0`` or a negative index

    Examples:
        >>> parse("1, 2, 3, 4-5, 11").ranges()
        [Range(start=1, end=5), Range(start=11, end=11)]
    """
    raw = parse_raw(text, config)
    selection = Selection(raw)
    log.debug("selection_parsed", tokens=len(raw), ranges=len(selection.ranges()))
    return selection
