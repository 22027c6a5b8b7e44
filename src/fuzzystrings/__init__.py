"""
fuzzystrings
============

Does: Root package for edit-distance based fuzzy string matching.
Returns: Re-exports the metrics (ratio, token_ratio, token_set_ratio, blended_ratio),
         the matcher (best_match, rank_all), StringMatch, MetricFn and InvalidInput.
Used by: Fuzzy search, deduplication and spell-correction candidate ranking.
"""

from .errors import InvalidInput
from .matching import (
    METRICS,
    NO_TOKENS,
    best_match,
    blended_ratio,
    edit_distance,
    get_metric,
    rank_all,
    ratio,
    token_ratio,
    token_set_ratio,
)
from .types import MetricFn, StringMatch

__all__: list[str] = [
    "InvalidInput",
    "MetricFn",
    "StringMatch",
    "NO_TOKENS",
    "edit_distance",
    "ratio",
    "token_ratio",
    "token_set_ratio",
    "blended_ratio",
    "METRICS",
    "get_metric",
    "best_match",
    "rank_all",
]
__docformat__ = "google"
