"""Needleman-Wunsch global alignment with a linear gap cost."""

from __future__ import annotations

from typing import List

from dpalign.algorithms.base import Candidate, Recurrence
from dpalign.algorithms.matrix import AlignmentMatrix
from dpalign.types.alignment import Origin
from dpalign.types.scoring import SimilarityFunction


class NeedlemanWunsch(Recurrence):
    """H[i][j] = max(diagonal + sim, up - g, left - g), no clipping.

    Row 0 and column 0 fall out of the same rule as cumulative leading-gap
    costs ``-i * g`` and ``-j * g``.
    """

    name = "needleman_wunsch"
    local = False

    def __init__(self, gap_per_unit: float) -> None:
        self.gap_per_unit = gap_per_unit

    def _candidates(
        self,
        matrix: AlignmentMatrix,
        similarity: SimilarityFunction,
        i: int,
        j: int,
    ) -> List[Candidate]:
        candidates: List[Candidate] = []
        if i > 0 and j > 0:
            candidates.append(
                (matrix.value(i - 1, j - 1) + similarity(i - 1, j - 1), Origin.DIAGONAL, 1)
            )
        if i > 0:
            candidates.append((matrix.value(i - 1, j) - self.gap_per_unit, Origin.VERTICAL, 1))
        if j > 0:
            candidates.append((matrix.value(i, j - 1) - self.gap_per_unit, Origin.HORIZONTAL, 1))
        return candidates


__all__ = ["NeedlemanWunsch"]
