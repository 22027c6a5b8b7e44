# src/fuzzystrings/errors.py
"""
errors.py.

Does: Define the single error kind raised by the scoring core.
Used by: matching.normalize (validity gate) and every public metric.
"""

from __future__ import annotations

__all__ = ["InvalidInput"]


class InvalidInput(ValueError):
    """Raise when a text is None, empty, or contains only whitespace characters."""

    def __init__(self, message: str = "String is None, empty, or contains only whitespace characters."):
        super().__init__(message)
