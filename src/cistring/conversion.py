"""Conversion of plain strings to CIString at API boundaries.

Provides two entry points:
    - to_ci: Single-dispatch conversion (str -> CIString, CIString unchanged)
    - ci_arguments: Decorator converting named parameters on every call

There is no global implicit coercion. A function that wants to accept both
spellings of its argument opts in with ci_arguments; everything else keeps
strict types.

Example:
    >>> from cistring import CIString
    >>> @ci_arguments("name")
    ... def is_hop_by_hop(name: CIString) -> bool:
    ...     return name in {CIString("Connection"), CIString("Keep-Alive")}
    >>> is_hop_by_hop("keep-alive")
    True

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from inspect import Parameter, signature
from typing import Any, TypeVar

from cistring.value import CIString

__all__ = ["ci_arguments", "to_ci"]

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Parameter kinds that bind to a single value and can be converted in place.
_CONVERTIBLE_KINDS = frozenset({
    Parameter.POSITIONAL_ONLY,
    Parameter.POSITIONAL_OR_KEYWORD,
    Parameter.KEYWORD_ONLY,
})


@functools.singledispatch
def to_ci(value: object) -> CIString:
    """Convert value to a CIString.

    Registered conversions:
        - str: wrapped verbatim
        - CIString: returned unchanged (no copy)

    Further types can be registered with ``to_ci.register``.

    Raises:
        TypeError: If no conversion is registered for type(value)
    """
    msg = f"Cannot convert {type(value).__name__} to CIString"
    raise TypeError(msg)


@to_ci.register
def _(value: str) -> CIString:
    return CIString(value)


@to_ci.register
def _(value: CIString) -> CIString:
    return value


def ci_arguments(*names: str) -> Callable[[F], F]:
    """Decorator converting the named parameters with to_ci on every call.

    Arguments bound to the named parameters are converted whether they are
    passed positionally or by keyword. Parameters left at their default are
    not touched.

    Args:
        *names: Parameter names to convert

    Returns:
        Decorator for the target function

    Raises:
        ValueError: At decoration time, if a name is not a parameter of the
            function or refers to a *args / **kwargs parameter
    """

    def decorator(func: F) -> F:
        sig = signature(func)
        for name in names:
            param = sig.parameters.get(name)
            if param is None:
                msg = f"{func.__qualname__}() has no parameter {name!r}"
                raise ValueError(msg)
            if param.kind not in _CONVERTIBLE_KINDS:
                msg = f"Cannot convert variadic parameter {name!r} of {func.__qualname__}()"
                raise ValueError(msg)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = sig.bind(*args, **kwargs)
            for name in names:
                if name in bound.arguments:
                    bound.arguments[name] = to_ci(bound.arguments[name])
            return func(*bound.args, **bound.kwargs)

        logger.debug("Converting parameters %s of %s to CIString", names, func.__qualname__)
        return wrapper  # type: ignore[return-value]

    return decorator
