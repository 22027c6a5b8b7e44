# src/fuzzystrings/matching/distance.py
"""
distance.py

Does: Levenshtein edit distance over any pair of finite sequences, using the
      full (rows+1) x (columns+1) dynamic-programming grid.
Returns: edit_distance() -> minimal count of insertions, deletions and substitutions.
Used by: Character-level ratio (str operands) and token-level ratio (list[str] operands).
"""

from __future__ import annotations

from typing import Hashable, List, Sequence, TypeVar

__all__ = ["edit_distance"]

__docformat__ = "google"

T = TypeVar("T", bound=Hashable)


def edit_distance(seq1: Sequence[T], seq2: Sequence[T]) -> int:
    """
    Does: Fill the edit-distance grid: row 0 holds column indices, column 0 holds
          row indices, every other cell is min(up + 1, left + 1, diagonal + cost).
    Returns: Bottom-right cell. 0 for two empty sequences.
    """
    rows = len(seq1) + 1
    columns = len(seq2) + 1

    distance: List[List[int]] = [[0] * columns for _ in range(rows)]
    for row in range(rows):
        distance[row][0] = row
    for column in range(columns):
        distance[0][column] = column

    for row in range(1, rows):
        left_item = seq1[row - 1]
        for column in range(1, columns):
            cost = 0 if left_item == seq2[column - 1] else 1
            distance[row][column] = min(
                distance[row - 1][column] + 1,         # deletion
                distance[row][column - 1] + 1,         # insertion
                distance[row - 1][column - 1] + cost,  # substitution
            )

    return distance[rows - 1][columns - 1]
