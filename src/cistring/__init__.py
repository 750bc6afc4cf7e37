"""cistring - case-insensitive string values with faithful display.

A CIString compares, orders and hashes its text ignoring letter case, while
str() returns the text exactly as it was given. Built for keying protocol
fields such as HTTP header names.

Public API:
    CIString - Immutable case-insensitive string value
    ci - Wrap a str in a CIString
    EMPTY - The empty CIString (concatenation identity)
    combine_all - Concatenate an iterable of CIString values
    to_ci - Convert str or CIString to CIString
    ci_arguments - Decorator converting named parameters to CIString
    CaseInsensitiveDict - Mutable mapping keyed by CIString
    equals_ignore_case - Ignore-case equality on plain strings
    compare_ignore_case - Ignore-case three-way comparison on plain strings

Exceptions:
    CIStringError - Base exception class
    CIStringIndexError - Index or range outside a CIString (an IndexError)

Submodules:
    cistring.folding - Simple case mappings and the ignore-case fold
    cistring.constants - Cache and display limits
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .conversion import ci_arguments, to_ci
from .errors import CIStringError, CIStringIndexError
from .folding import compare_ignore_case, equals_ignore_case
from .mapping import CaseInsensitiveDict
from .value import EMPTY, CIString, ci, combine_all

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("cistring")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EMPTY",
    "CIString",
    "CIStringError",
    "CIStringIndexError",
    "CaseInsensitiveDict",
    "__version__",
    "ci",
    "ci_arguments",
    "combine_all",
    "compare_ignore_case",
    "equals_ignore_case",
    "to_ci",
]
