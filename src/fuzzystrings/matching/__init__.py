# src/fuzzystrings/matching/__init__.py
"""
matching.

Does: Facade over the edit-distance engine, text normalization, the four
similarity metrics and the matcher/ranker.

Returns: Public API for scoring string pairs and ranking candidates.
Used by: fuzzystrings (top-level facade) and the CLI demo.
"""

from __future__ import annotations

# ── Engine ───────────────────────────────────────────────────────────────────
from .distance import edit_distance

# ── Matcher ──────────────────────────────────────────────────────────────────
from .matcher import (
    METRICS,
    best_match,
    get_metric,
    rank_all,
)

# ── Normalization ────────────────────────────────────────────────────────────
from .normalize import (
    is_invalid,
    normalize_text,
    require_valid,
    tokenize,
)

# ── Scoring ──────────────────────────────────────────────────────────────────
from .scoring import (
    NO_TOKENS,
    blended_ratio,
    ratio,
    round_half_up,
    token_ratio,
    token_set_ratio,
)

__all__ = [
    # Engine
    "edit_distance",
    # Normalization
    "normalize_text",
    "tokenize",
    "is_invalid",
    "require_valid",
    # Scoring
    "NO_TOKENS",
    "round_half_up",
    "ratio",
    "token_ratio",
    "token_set_ratio",
    "blended_ratio",
    # Matcher
    "METRICS",
    "get_metric",
    "best_match",
    "rank_all",
]

__docformat__ = "google"
