"""Fuzz-marked property tests, run with: pytest -m fuzz."""
