"""cistring test suite."""
