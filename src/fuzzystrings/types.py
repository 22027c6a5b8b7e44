# src/fuzzystrings/types.py
"""
types.py.

Does: Define the callable contract shared by all metrics and the immutable
match record produced by the matcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class MetricFn(Protocol):
    def __call__(self, s1: str, s2: str, ignore_case: bool) -> int: ...


@dataclass(frozen=True)
class StringMatch:
    """
    Does: Hold one scored candidate. Equality compares score and text;
          ordering compares score only, so sorted() ranks by score.
    """

    score: int
    text: str

    def __lt__(self, other: StringMatch) -> bool:
        if not isinstance(other, StringMatch):
            return NotImplemented
        return self.score < other.score

    def __le__(self, other: StringMatch) -> bool:
        if not isinstance(other, StringMatch):
            return NotImplemented
        return self.score <= other.score

    def __gt__(self, other: StringMatch) -> bool:
        if not isinstance(other, StringMatch):
            return NotImplemented
        return self.score > other.score

    def __ge__(self, other: StringMatch) -> bool:
        if not isinstance(other, StringMatch):
            return NotImplemented
        return self.score >= other.score


__all__ = ["MetricFn", "StringMatch"]

__docformat__ = "google"
