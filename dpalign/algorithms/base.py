"""Shared fill loop and tie-break rule for the DP recurrences."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Tuple

from dpalign.algorithms.matrix import AlignmentMatrix
from dpalign.types.alignment import Origin
from dpalign.types.scoring import SimilarityFunction

NEG_INF = float("-inf")
Candidate = Tuple[float, Origin, int]


class Recurrence(ABC):
    """One DP variant: how a cell is computed from its predecessors."""

    name: str = "recurrence"
    local: bool = False

    def fill(
        self,
        matrix: AlignmentMatrix,
        similarity: SimilarityFunction,
        len_s: int,
        len_t: int,
    ) -> Tuple[float, Tuple[int, int]]:
        """Fill the reset matrix row by row and return the score and end cell.

        Global variants end at ``(len_s, len_t)``. Local variants end at the
        first cell, in row-major order, holding the maximal value.
        """
        self._prepare(matrix, len_s, len_t)
        best, end = 0.0, (0, 0)
        for i in range(len_s + 1):
            for j in range(len_t + 1):
                if i == 0 and j == 0:
                    continue
                value, origin, length = self._settle(
                    self._candidates(matrix, similarity, i, j)
                )
                matrix.set(i, j, value, origin, length)
                if self.local and value > best:
                    best, end = value, (i, j)

        if self.local:
            return best, end
        return matrix.value(len_s, len_t), (len_s, len_t)

    def _prepare(self, matrix: AlignmentMatrix, len_s: int, len_t: int) -> None:
        """Per-call setup before the first cell is computed."""

    @abstractmethod
    def _candidates(
        self,
        matrix: AlignmentMatrix,
        similarity: SimilarityFunction,
        i: int,
        j: int,
    ) -> List[Candidate]:
        """Predecessor candidates for cell ``(i, j)`` in tie-break order."""
        raise NotImplementedError

    def _settle(self, candidates: List[Candidate]) -> Candidate:
        """Pick the first maximal candidate; clip to START for local variants."""
        value, origin, length = NEG_INF, Origin.START, 0
        for candidate in candidates:
            if candidate[0] > value:
                value, origin, length = candidate
        if self.local and value <= 0:
            return 0.0, Origin.START, 0
        return value, origin, length


__all__ = ["Recurrence", "Candidate", "NEG_INF"]
