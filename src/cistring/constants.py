"""Shared constants for cistring.

Constants are grouped by domain:
- Cache limits: Memory bounds for the per-character fold memo
- Display limits: Truncation for debug representations

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Cache limits
    "FOLD_CACHE_SIZE",
    # Display limits
    "MAX_REPR_LENGTH",
]

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized characters in folding.fold_char().
# Only non-ASCII text reaches the memo (ASCII folds via str.lower()).
# 4096 covers every cased letter of the common European and Greek blocks
# several times over while keeping the memo a few hundred KB at most.
FOLD_CACHE_SIZE: int = 4096

# ============================================================================
# DISPLAY LIMITS
# ============================================================================

# Maximum characters of the original text shown in error messages.
# Longer values are cut and suffixed with "..." so that an IndexError raised
# on a multi-megabyte header value does not flood the logs.
MAX_REPR_LENGTH: int = 64
