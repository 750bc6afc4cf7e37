"""Mutable mapping keyed case-insensitively by CIString.

Design:
- Keys are stored as CIString; str keys are converted with to_ci().
- Lookup, containment and deletion ignore case.
- Writing an existing logical key ("Content-Type" over "content-type")
  replaces the value AND the stored spelling, but keeps the position.
- Iteration yields CIString keys in their last-written spelling, in
  first-insertion order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import TypeVar

from cistring.conversion import to_ci
from cistring.value import CIString

__all__ = ["CaseInsensitiveDict"]

logger = logging.getLogger(__name__)

V = TypeVar("V")


class CaseInsensitiveDict(MutableMapping[CIString, V]):
    """Dictionary with case-insensitive CIString keys.

    Internal structure:
        self._data: {CIString: (CIString as last written, value)}

    The outer dict key is whichever spelling was inserted first; since
    CIString equality ignores case it matches every spelling. The stored
    tuple carries the spelling reported by iteration.

    Example:
        >>> headers = CaseInsensitiveDict({"Content-Type": "text/plain"})
        >>> headers["content-type"]
        'text/plain'
        >>> headers["CONTENT-TYPE"] = "text/html"
        >>> [str(k) for k in headers]
        ['CONTENT-TYPE']
        >>> "Content-type" in headers
        True
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        data: Mapping[CIString | str, V] | Iterable[tuple[CIString | str, V]] | None = None,
        /,
        **kwargs: V,
    ) -> None:
        """Initialize from an optional mapping or iterable of pairs, then kwargs."""
        self._data: dict[CIString, tuple[CIString, V]] = {}
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    def __setitem__(self, key: CIString | str, value: V) -> None:
        ci_key = to_ci(key)
        previous = self._data.get(ci_key)
        if previous is not None and previous[0].original != ci_key.original:
            logger.debug("Replacing key spelling %r with %r", previous[0].original, ci_key.original)
        self._data[ci_key] = (ci_key, value)

    def __getitem__(self, key: CIString | str) -> V:
        return self._data[to_ci(key)][1]

    def __delitem__(self, key: CIString | str) -> None:
        del self._data[to_ci(key)]

    def __iter__(self) -> Iterator[CIString]:
        return (stored for stored, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (str, CIString)):
            return to_ci(key) in self._data
        return False

    def __repr__(self) -> str:
        inner = ", ".join(f"{k.original!r}: {v!r}" for k, v in self._data.values())
        return f"{type(self).__name__}({{{inner}}})"

    def copy(self) -> CaseInsensitiveDict[V]:
        """Return a shallow copy preserving key spellings and order."""
        new: CaseInsensitiveDict[V] = type(self)()
        new._data = dict(self._data)
        return new
