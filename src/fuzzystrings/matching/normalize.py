# src/fuzzystrings/matching/normalize.py
# ──────────────────────────────────────────────────────────────
# Text preparation shared by every metric
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Prepare raw text for comparison (optional punctuation stripping with
      Unicode word boundaries, optional locale-independent lowercasing),
      split it into tokens, and gate invalid inputs.
Returns: normalize_text(), tokenize(), is_invalid(), require_valid().
Used by: matching.scoring before any distance is computed.
"""

from __future__ import annotations

from typing import Any, List

import regex

from fuzzystrings.errors import InvalidInput

__all__ = [
    "normalize_text",
    "tokenize",
    "is_invalid",
    "require_valid",
]

# `regex` follows Unicode TR#18 for \w (letters, marks, digits, connectors,
# join controls); stdlib `re` leaves combining marks out.
_NON_WORD_RE = regex.compile(r"\W+")
_SPACES_RE = regex.compile(r"\s+")


# ──────────────────────────────────────────────────────────────
# 1) NORMALIZATION
# ──────────────────────────────────────────────────────────────


def normalize_text(text: str, *, fold_case: bool = False, strip_punctuation: bool = False) -> str:
    """
    Does: Optionally replace every run of non-word characters with one space,
          collapse whitespace and trim; then optionally lowercase.
    Returns: Normalized text (the input itself when both options are off).

    Stripping runs first so that word boundaries are read on the original casing.
    `str.lower` never consults the process locale, so no Turkish dotless-i surprises.
    """
    result = text
    if strip_punctuation:
        result = _NON_WORD_RE.sub(" ", result)
        result = _SPACES_RE.sub(" ", result)
        result = result.strip()
    if fold_case:
        result = result.lower()
    return result


def tokenize(text: str, *, fold_case: bool = False) -> List[str]:
    """
    Does: Strip punctuation (and optionally fold case), then split on whitespace.
    Returns: Ordered tokens with duplicates kept; [] when no word characters remain.
    """
    return normalize_text(text, fold_case=fold_case, strip_punctuation=True).split()


# ──────────────────────────────────────────────────────────────
# 2) VALIDITY
# ──────────────────────────────────────────────────────────────


def is_invalid(text: Any) -> bool:
    """Does: True for None, non-strings, and strings that are empty once trimmed."""
    return not isinstance(text, str) or not text.strip()


def require_valid(*texts: Any) -> None:
    """Does: Raise InvalidInput if any argument fails is_invalid()."""
    for text in texts:
        if is_invalid(text):
            raise InvalidInput()
