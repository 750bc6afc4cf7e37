"""Exception hierarchy for cistring.

Indexing and sub-sequencing are the only partial operations on a CIString,
so the hierarchy is deliberately small. CIStringIndexError subclasses the
builtin IndexError so that ordinary sequence error handling keeps working.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = ["CIStringError", "CIStringIndexError"]


class CIStringError(Exception):
    """Base exception for all cistring errors."""


class CIStringIndexError(CIStringError, IndexError):
    """Position or range outside the bounds of a CIString.

    Raised by CIString.char_at() and CIString.sub_sequence(). The bounds are
    always checked against the ORIGINAL text, never the folded form.

    Attributes:
        index: The offending position (or the start/end pair for ranges)
        length: Length of the original text at the time of the call

    Example:
        >>> from cistring import ci
        >>> ci("Host").char_at(4)
        Traceback (most recent call last):
            ...
        cistring.errors.CIStringIndexError: index 4 out of range for length 4
    """

    def __init__(self, message: str, *, index: int | tuple[int, int], length: int) -> None:
        """Initialize CIStringIndexError.

        Args:
            message: Human-readable error message
            index: The offending position, or (start, end) for a range
            length: Length of the original text
        """
        super().__init__(message)
        self.index = index
        self.length = length
