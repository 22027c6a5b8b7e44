# src/fuzzystrings/matching/matcher.py
"""
matcher.py

Does: Apply one metric across a candidate collection: keep the single best
      match, or score everything and rank it. Also resolves metrics by name.
Returns: best_match() -> StringMatch, rank_all() -> list[StringMatch],
         get_metric() -> MetricFn.
Used by: The public facade, the CLI demo, and callers doing search/dedup.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Union

from fuzzystrings.types import MetricFn, StringMatch

from .scoring import blended_ratio, ratio, token_ratio, token_set_ratio

__all__ = [
    "METRICS",
    "get_metric",
    "best_match",
    "rank_all",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Registry ─────────────────────────────────────────────────────────────────
METRICS: Mapping[str, MetricFn] = {
    "ratio": ratio,
    "token": token_ratio,
    "token_set": token_set_ratio,
    "blended": blended_ratio,
}

NO_MATCH_SCORE = -1


def get_metric(metric: Union[str, MetricFn]) -> MetricFn:
    """
    Does: Pass callables through; look names up in METRICS
          (case-insensitive, '-' and '_' interchangeable).
    Returns: MetricFn.
    Raises: KeyError for an unknown name.
    """
    if callable(metric):
        return metric
    key = str(metric).strip().lower().replace("-", "_")
    try:
        return METRICS[key]
    except KeyError:
        raise KeyError(
            f"Unknown metric {metric!r}; expected one of: {', '.join(sorted(METRICS))}"
        ) from None


# ─────────────────────────────────────────────────────────────────────────────
# 1) BEST MATCH
# ─────────────────────────────────────────────────────────────────────────────

def best_match(
    query: str,
    candidates: Iterable[str],
    metric: MetricFn = ratio,
    ignore_case: bool = False,
    *,
    debug: bool = False,
) -> StringMatch:
    """
    Does: Score every candidate against `query` and keep the highest. On a tie the
          later candidate wins (>= comparison).
    Returns: StringMatch; StringMatch(-1, "") when there are no candidates.
    Raises: InvalidInput from `metric`, unchanged.
    """
    best_score = NO_MATCH_SCORE
    best_text = ""
    for candidate in candidates:
        score = metric(query, candidate, ignore_case)
        if debug:
            log.debug("[SCORE] %r vs %r = %d", query, candidate, score)
        if score >= best_score:
            best_score, best_text = score, candidate

    if debug:
        log.debug("[BEST] %r → %r (%d)", query, best_text, best_score)
    return StringMatch(best_score, best_text)


# ─────────────────────────────────────────────────────────────────────────────
# 2) RANK ALL
# ─────────────────────────────────────────────────────────────────────────────

def rank_all(
    query: str,
    candidates: Iterable[str],
    metric: MetricFn = ratio,
    ignore_case: bool = False,
    *,
    debug: bool = False,
) -> List[StringMatch]:
    """
    Does: Score every candidate, then stable-sort by descending score
          (equal scores keep their input order).
    Returns: One StringMatch per candidate, sentinels included.
    Raises: InvalidInput from `metric`; a single bad candidate aborts the call.
    """
    results = [StringMatch(metric(query, candidate, ignore_case), candidate) for candidate in candidates]
    results.sort(key=lambda m: m.score, reverse=True)

    if debug:
        for m in results:
            log.debug("[RANK] %d: %r", m.score, m.text)
    return results
