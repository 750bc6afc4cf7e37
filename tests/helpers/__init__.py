"""Shared assertion helpers and reference oracles for the cistring test suite."""
