"""Configuration for selection string parsing."""

from __future__ import annotations

from dataclasses import dataclass

# Largest index representable as a native 64-bit unsigned integer
DEFAULT_MAX_INDEX = 2**64 - 1


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for the selection parser.

    Attributes:
        delimiters: Characters that separate tokens. Any run of them, in any
            mix, counts as a single separator.
        max_index: Largest accepted index. Anything larger is rejected as an
            overflow rather than clamped.
        allow_none_literal: Accept the whole input ``none`` (any case) as an
            explicitly empty selection.
    """

    delimiters: str = " \t,;"
    max_index: int = DEFAULT_MAX_INDEX
    allow_none_literal: bool = True

    def __post_init__(self) -> None:
        """Validate the delimiter set and index bound."""
        if not self.delimiters:
            raise ValueError("At least one delimiter character is required")
        for char in self.delimiters:
            if char.isdigit() or char == "-":
                raise ValueError(f"Invalid delimiter character: {char!r}")
        if self.max_index < 1:
            raise ValueError(f"max_index must be at least 1, got {self.max_index}")

    @classmethod
    def strict(cls) -> ParserConfig:
        """Only space, comma and semicolon separate tokens; no ``none`` keyword."""
        return cls(delimiters=" ,;", allow_none_literal=False)

    @classmethod
    def for_list(cls, total: int) -> ParserConfig:
        """Reject any index past the end of a list of ``total`` items."""
        return cls(max_index=total)


DEFAULT_CONFIG = ParserConfig()
