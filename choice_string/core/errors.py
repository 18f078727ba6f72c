"""Errors raised while parsing selection strings."""

from __future__ import annotations

from typing import Literal

InvalidReason = Literal["non-numeric", "empty side", "overflow"]


class ParseError(ValueError):
    """
    Base class for all selection parsing errors.

    Attributes:
        token: The offending token text, exactly as typed
        position: 0-based character offset of the token in the input
        message: Human-readable description, suitable for showing to a user
    """

    def __init__(self, token: str, message: str, position: int | None = None) -> None:
        self.token = token
        self.position = position
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


class InvalidTokenError(ParseError):
    """Raised when a token is neither a positive integer nor an ``N-M`` range."""

    def __init__(
        self, token: str, reason: InvalidReason, position: int | None = None
    ) -> None:
        self.reason = reason
        super().__init__(token, f"Invalid token '{token}': {reason}", position)


class ReversedRangeError(ParseError):
    """Raised for a range token whose start is greater than its end."""

    def __init__(
        self, token: str, start: int, end: int, position: int | None = None
    ) -> None:
        self.start = start
        self.end = end
        super().__init__(
            token,
            f"Reversed range '{token}': start {start} is greater than end {end}",
            position,
        )


class ZeroOrNegativeIndexError(ParseError):
    """Raised when a token denotes index 0 or a negative index."""

    def __init__(self, token: str, position: int | None = None) -> None:
        super().__init__(
            token, f"Index out of range '{token}': indices start at 1", position
        )
