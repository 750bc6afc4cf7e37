"""Case-insensitive string value type.

CIString wraps an ordinary string and redefines equality, ordering and
hashing to ignore letter case, while keeping the original text for display.
Typical use is keying protocol fields such as HTTP header names, where
"Accept", "accept" and "ACCEPT" are one key but the spelling that was sent
must be reproduced on serialization.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from cistring.constants import MAX_REPR_LENGTH
from cistring.errors import CIStringIndexError
from cistring.folding import fold

__all__ = ["EMPTY", "CIString", "ci", "combine_all"]


def _preview(text: str) -> str:
    if len(text) <= MAX_REPR_LENGTH:
        return repr(text)
    return repr(text[:MAX_REPR_LENGTH]) + "..."


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class CIString:
    """Immutable string wrapper with case-insensitive equality, order and hash.

    Equality, ordering and hashing all go through one folded form of the text
    (see cistring.folding), so the following hold by construction:

        - a == b is an equivalence relation
        - a == b  <=>  a.compare(b) == 0
        - a == b   => hash(a) == hash(b)

    Length, indexing, slicing, iteration and display operate on the ORIGINAL
    text. The folded form is computed on first use and cached; it is never
    returned by any public method.

    Comparison with a plain str is not case-insensitive: CIString("a") == "a"
    is False and CIString("a") < "b" raises TypeError. Use ci() or to_ci() to
    convert at the boundary.

    Attributes:
        original: The text exactly as given at construction

    Example:
        >>> a, b = CIString("Accept"), CIString("ACCEPT")
        >>> a == b, hash(a) == hash(b)
        (True, True)
        >>> str(a), str(b)
        ('Accept', 'ACCEPT')
        >>> sorted([CIString("b"), CIString("A"), CIString("c")])
        [CIString('A'), CIString('b'), CIString('c')]
    """

    original: str
    _folded: str | None = field(default=None, init=False, compare=False)

    def __post_init__(self) -> None:
        """Validate and normalize the wrapped text.

        Raises:
            TypeError: If original is not a str
        """
        if not isinstance(self.original, str):
            msg = f"CIString wraps str, got {type(self.original).__name__}"
            raise TypeError(msg)
        if type(self.original) is not str:
            object.__setattr__(self, "original", str.__str__(self.original))

    @classmethod
    def empty(cls) -> CIString:
        """Return the identity element for concatenation."""
        return EMPTY

    # ------------------------------------------------------------------
    # Folded form
    # ------------------------------------------------------------------

    def _key(self) -> str:
        # Idempotent write: racing threads compute and store equal strings.
        folded = self._folded
        if folded is None:
            folded = fold(self.original)
            object.__setattr__(self, "_folded", folded)
        return folded

    # ------------------------------------------------------------------
    # Equality, ordering, hashing
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CIString):
            return NotImplemented
        if self is other:
            return True
        if len(self.original) != len(other.original):
            return False
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, CIString):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        return hash(self._key())

    def compare(self, other: CIString) -> int:
        """Three-way ignore-case comparison.

        Folded code points are compared left to right; the first difference
        decides, otherwise the shorter value sorts first.

        Returns:
            -1, 0 or 1

        Example:
            >>> CIString("apple").compare(CIString("BANANA"))
            -1
            >>> CIString("Straße").compare(CIString("STRAẞE"))
            0
        """
        a = self._key()
        b = other._key()
        if a == b:
            return 0
        return -1 if a < b else 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CIString):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CIString):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CIString):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CIString):
            return NotImplemented
        return self._key() >= other._key()

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def display(self) -> str:
        """Return the original text, unchanged."""
        return self.original

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"CIString({self.original!r})"

    # ------------------------------------------------------------------
    # Sequence protocol over the original text
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.original)

    def __iter__(self) -> Iterator[str]:
        return iter(self.original)

    def __getitem__(self, key: int | slice) -> str | CIString:
        """Python-style indexing into the original text.

        Integer keys return a one-character str and accept negative indices;
        slices return a CIString and clamp like str slices. For strict
        bounds checking use char_at() and sub_sequence().
        """
        if isinstance(key, slice):
            return CIString(self.original[key])
        return self.original[key]

    def __contains__(self, needle: object) -> bool:
        """Case-insensitive substring test.

        Folding preserves length, so a match in the folded text is a match
        at the same position in the original.

        Raises:
            TypeError: If needle is neither str nor CIString
        """
        if isinstance(needle, CIString):
            return needle._key() in self._key()
        if isinstance(needle, str):
            return fold(needle) in self._key()
        msg = f"'in <CIString>' requires str or CIString as left operand, not {type(needle).__name__}"
        raise TypeError(msg)

    def char_at(self, index: int) -> str:
        """Return the character at index in the original text.

        Args:
            index: Position in [0, len(self))

        Raises:
            CIStringIndexError: If index is outside [0, len(self))
        """
        length = len(self.original)
        if not 0 <= index < length:
            msg = f"index {index} out of range for length {length}"
            raise CIStringIndexError(msg, index=index, length=length)
        return self.original[index]

    def sub_sequence(self, start: int, end: int) -> CIString:
        """Return a new CIString wrapping original[start:end].

        Args:
            start: First position, in [0, len(self)]
            end: Position after the last character, in [start, len(self)]

        Raises:
            CIStringIndexError: If the range is outside the original text
                or start > end
        """
        length = len(self.original)
        if not 0 <= start <= end <= length:
            msg = (
                f"range [{start}, {end}) out of bounds for "
                f"{_preview(self.original)} (length {length})"
            )
            raise CIStringIndexError(msg, index=(start, end), length=length)
        return CIString(self.original[start:end])

    # ------------------------------------------------------------------
    # Concatenation
    # ------------------------------------------------------------------

    def concat(self, other: CIString) -> CIString:
        """Return a new CIString wrapping self.original + other.original."""
        if not other.original:
            return self
        if not self.original:
            return other
        return CIString(self.original + other.original)

    def __add__(self, other: object) -> CIString:
        if isinstance(other, CIString):
            return self.concat(other)
        if isinstance(other, str):
            return self.concat(CIString(other))
        return NotImplemented

    def __radd__(self, other: object) -> CIString:
        if isinstance(other, str):
            return CIString(other).concat(self)
        return NotImplemented


EMPTY = CIString("")


def ci(text: str) -> CIString:
    """Wrap text in a CIString.

    Example:
        >>> ci("Content-Type") == ci("content-type")
        True
    """
    return CIString(text)


def combine_all(values: Iterable[CIString]) -> CIString:
    """Concatenate values in order, starting from EMPTY.

    Example:
        >>> combine_all([ci("X-"), ci("Request-"), ci("Id")])
        CIString('X-Request-Id')
        >>> combine_all([]) is EMPTY
        True
    """
    parts = [value.original for value in values]
    if not parts:
        return EMPTY
    return CIString("".join(parts))
