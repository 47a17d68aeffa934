"""O(n * m) recurrence for affine gap costs ``opening + (n - 1) * extension``."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from dpalign.algorithms.base import NEG_INF, Candidate, Recurrence
from dpalign.algorithms.matrix import AlignmentMatrix
from dpalign.types.alignment import Origin
from dpalign.types.scoring import SimilarityFunction


class AffineGapRecurrence(Recurrence):
    """Three-table (Gotoh) form of Waterman-Smith-Beyer for affine gaps.

    ``V[i][j]`` and ``W[i][j]`` hold the best score of a vertical and a
    horizontal gap run ending at ``(i, j)``, together with the run length.
    Opening wins ties against extending, which picks the same shortest run
    as the full scan over k in :class:`WatermanSmithBeyer`.
    """

    name = "affine_gap"

    def __init__(self, opening: float, extension: float, local: bool = True) -> None:
        self.opening = opening
        self.extension = extension
        self.local = local
        self._vertical = np.full((1, 1), NEG_INF)
        self._vertical_len = np.zeros((1, 1), dtype=np.int64)
        self._horizontal = np.full((1, 1), NEG_INF)
        self._horizontal_len = np.zeros((1, 1), dtype=np.int64)

    def _prepare(self, matrix: AlignmentMatrix, len_s: int, len_t: int) -> None:
        # side tables live in the matrix arena and are reused across calls
        (
            self._vertical,
            self._vertical_len,
            self._horizontal,
            self._horizontal_len,
        ) = matrix.gap_runs()

    def _run(
        self, opened: float, extended: float, previous_len: int
    ) -> Tuple[float, int]:
        if opened >= extended:
            return opened, 1
        return extended, previous_len + 1

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
            value, length = self._run(
                matrix.value(i - 1, j) - self.opening,
                float(self._vertical[i - 1, j]) - self.extension,
                int(self._vertical_len[i - 1, j]),
            )
            self._vertical[i, j] = value
            self._vertical_len[i, j] = length
            candidates.append((value, Origin.VERTICAL, length))
        if j > 0:
            value, length = self._run(
                matrix.value(i, j - 1) - self.opening,
                float(self._horizontal[i, j - 1]) - self.extension,
                int(self._horizontal_len[i, j - 1]),
            )
            self._horizontal[i, j] = value
            self._horizontal_len[i, j] = length
            candidates.append((value, Origin.HORIZONTAL, length))
        return candidates


__all__ = ["AffineGapRecurrence"]
