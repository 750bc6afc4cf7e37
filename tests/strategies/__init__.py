"""Hypothesis strategies for cistring property-based testing.

Strategies are organized by domain:

- text: Arbitrary and cased text, case variants, in-bounds index tuples,
  and CIString values

Usage:
    from tests.strategies import any_text, ci_strings
    from tests.strategies.text import text_with_index, text_with_range

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - mixed_text, text_with_index, text_with_range
"""

from .text import (
    TRICKY_CASE_CHARS,
    any_text,
    case_variant,
    cased_text,
    ci_strings,
    ci_strings_dense,
    header_names,
    mixed_text,
    text_pairs_equal_ignoring_case,
    text_with_index,
    text_with_range,
)

__all__ = [
    "TRICKY_CASE_CHARS",
    "any_text",
    "case_variant",
    "cased_text",
    "ci_strings",
    "ci_strings_dense",
    "header_names",
    "mixed_text",
    "text_pairs_equal_ignoring_case",
    "text_with_index",
    "text_with_range",
]
