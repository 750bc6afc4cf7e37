"""Performance benchmarks for cistring.

Benchmarks use pytest-benchmark to measure and track performance of the
fold, the cached hash and case-insensitive lookups.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
