# src/fuzzystrings/matching/scoring.py
"""
scoring.py

Does: Edit-distance based similarity metrics on a 0-100 scale: character ratio,
      token-sequence ratio, token-set ratio and their blended mean.
Returns: ratio, token_ratio, token_set_ratio, blended_ratio (all MetricFn-compatible).
Used by: matching.matcher, the CLI demo, and any caller ranking candidates.
"""

from __future__ import annotations

import math
from typing import Set

from .distance import edit_distance
from .normalize import normalize_text, require_valid, tokenize

__all__ = [
    "NO_TOKENS",
    "round_half_up",
    "ratio",
    "token_ratio",
    "token_set_ratio",
    "blended_ratio",
]

__docformat__ = "google"

# ── Constants ────────────────────────────────────────────────────────────────
PERFECT_SCORE = 100
NO_TOKENS = -1  # neither input holds a single word character


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def round_half_up(value: float) -> int:
    """
    Does: Round to nearest integer, ties upward (12.5 → 13).
    Returns: int. Builtin round() would send 12.5 to 12.
    """
    return int(math.floor(value + 0.5))


def _percentage(total: int, distance: int) -> int:
    # case folding can lengthen text ("İ" → "i̇"), so distance may exceed total
    score = round_half_up(PERFECT_SCORE * (total - distance) / total)
    return max(0, min(PERFECT_SCORE, score))


def _token_set(text: str, ignore_case: bool) -> Set[str]:
    return set(tokenize(text, fold_case=ignore_case))


# ─────────────────────────────────────────────────────────────────────────────
# 1) Character ratio
# ─────────────────────────────────────────────────────────────────────────────

def ratio(s1: str, s2: str, ignore_case: bool = False) -> int:
    """
    Does: Character-level Levenshtein similarity.
    Returns: round(100 * (len1 + len2 - d) / (len1 + len2)), lengths taken on the raw inputs.
    Raises: InvalidInput if either string is None, empty or whitespace-only.
    """
    require_valid(s1, s2)
    if s1 == s2:
        return PERFECT_SCORE

    str1 = normalize_text(s1, fold_case=ignore_case)
    str2 = normalize_text(s2, fold_case=ignore_case)
    distance = edit_distance(str1, str2)
    return _percentage(len(s1) + len(s2), distance)


# ─────────────────────────────────────────────────────────────────────────────
# 2) Token ratio
# ─────────────────────────────────────────────────────────────────────────────

def token_ratio(s1: str, s2: str, ignore_case: bool = False) -> int:
    """
    Does: Levenshtein similarity over word tokens (punctuation stripped, order kept).
    Returns: Score in [0,100], or NO_TOKENS (-1) when both inputs have zero tokens.
    Raises: InvalidInput on invalid input.
    """
    require_valid(s1, s2)
    tokens1 = tokenize(s1, fold_case=ignore_case)
    tokens2 = tokenize(s2, fold_case=ignore_case)
    total = len(tokens1) + len(tokens2)
    if total == 0:
        return NO_TOKENS

    distance = edit_distance(tokens1, tokens2)
    return _percentage(total, distance)


# ─────────────────────────────────────────────────────────────────────────────
# 3) Token-set ratio
# ─────────────────────────────────────────────────────────────────────────────

def token_set_ratio(s1: str, s2: str, ignore_case: bool = False) -> int:
    """
    Does: Compare distinct token sets, ignoring word order and repetitions.
    Returns: round(100 * (total - diff) / total) with total = |set1| + |set2| and
             diff = |set1 ^ set2|; 100 for equal sets; NO_TOKENS if both are empty.
    Raises: InvalidInput on invalid input.
    """
    require_valid(s1, s2)
    set1 = _token_set(s1, ignore_case)
    set2 = _token_set(s2, ignore_case)
    total = len(set1) + len(set2)
    if total == 0:
        return NO_TOKENS
    if set1 == set2:
        return PERFECT_SCORE

    difference = len(set1 ^ set2)
    return _percentage(total, difference)


# ─────────────────────────────────────────────────────────────────────────────
# 4) Blended ratio
# ─────────────────────────────────────────────────────────────────────────────

def blended_ratio(s1: str, s2: str, ignore_case: bool = False) -> int:
    """
    Does: Average ratio, token_ratio and token_set_ratio.
    Returns: Rounded mean. A NO_TOKENS component is averaged in as -1, unadjusted.
    Raises: InvalidInput on invalid input (checked before the equality shortcut).
    """
    require_valid(s1, s2)
    if s1 == s2:
        return PERFECT_SCORE

    simple = ratio(s1, s2, ignore_case)
    token = token_ratio(s1, s2, ignore_case)
    token_set = token_set_ratio(s1, s2, ignore_case)
    return round_half_up((simple + token + token_set) / 3)
