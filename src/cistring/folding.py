"""Simple case mappings and the ignore-case fold.

Two characters are equal ignoring case if they are identical, if their
uppercase forms are identical, or if their lowercase forms are identical.
Neither direction alone gives a canonical form that hashes consistently:

    - "ς" and "Σ" share an uppercase form but lowercase differently
      (final sigma), so a lowercase-only hash splits ὈΔΥΣΣΕΎΣ/Ὀδυσσεύς.
    - "ß" and "ẞ" share a lowercase form but uppercase differently,
      so an uppercase-only hash splits Straße/STRAẞE.

fold_char() therefore composes both mappings: uppercase first, then
lowercase the result. Characters with equal uppercase forms fold equally by
construction; characters with equal lowercase forms fold equally because
fold_char(c) == fold_char(simple_lower(c)) for every code point (checked
exhaustively in tests/test_folding.py).

Mappings are SIMPLE (one code point in, one code point out). Python only
exposes full mappings via str.upper()/str.lower(); where the full mapping
expands ("ß".upper() == "SS"), the character maps to itself. Folding never
changes length, so positions in the folded text line up with the original.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools

from cistring.constants import FOLD_CACHE_SIZE

__all__ = [
    "compare_ignore_case",
    "equals_ignore_case",
    "fold",
    "fold_char",
    "simple_lower",
    "simple_upper",
]


def simple_upper(char: str) -> str:
    """Return the single-code-point uppercase mapping of char.

    Example:
        >>> simple_upper("ς")
        'Σ'
        >>> simple_upper("ß")  # full mapping is "SS"
        'ß'
    """
    mapped = char.upper()
    return mapped if len(mapped) == 1 else char


def simple_lower(char: str) -> str:
    """Return the single-code-point lowercase mapping of char.

    Example:
        >>> simple_lower("ẞ")
        'ß'
        >>> simple_lower("İ")  # full mapping is "i" + COMBINING DOT ABOVE
        'İ'
    """
    mapped = char.lower()
    return mapped if len(mapped) == 1 else char


@functools.lru_cache(maxsize=FOLD_CACHE_SIZE)
def fold_char(char: str) -> str:
    """Fold one code point: lowercase of the uppercase.

    Thread-safe via lru_cache internal locking.

    Example:
        >>> fold_char("ς"), fold_char("Σ"), fold_char("σ")
        ('σ', 'σ', 'σ')
        >>> fold_char("ẞ"), fold_char("ß")
        ('ß', 'ß')
    """
    return simple_lower(simple_upper(char))


def fold(text: str) -> str:
    """Fold every code point of text.

    The result has the same length as text. ASCII text takes the str.lower()
    fast path, which is equivalent for the ASCII range.

    Args:
        text: Any string

    Returns:
        Folded string; equal for inputs that are equal ignoring case
    """
    if text.isascii():
        return text.lower()
    return "".join(map(fold_char, text))


def equals_ignore_case(a: str, b: str) -> bool:
    """Return True if a and b are equal ignoring case.

    Example:
        >>> equals_ignore_case("Straße", "STRAẞE")
        True
        >>> equals_ignore_case("Straße", "STRASSE")
        False
    """
    return len(a) == len(b) and fold(a) == fold(b)


def compare_ignore_case(a: str, b: str) -> int:
    """Three-way ignore-case comparison of two strings.

    Compares the folded code points left to right; the first difference
    decides, otherwise the shorter string sorts first.

    Returns:
        -1, 0 or 1
    """
    folded_a = fold(a)
    folded_b = fold(b)
    if folded_a == folded_b:
        return 0
    return -1 if folded_a < folded_b else 1
