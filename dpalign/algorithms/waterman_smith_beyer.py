"""Waterman-Smith-Beyer alignment with an arbitrary gap-cost function."""

from __future__ import annotations

from typing import List

import numpy as np

from dpalign.algorithms.base import Candidate, Recurrence
from dpalign.algorithms.matrix import AlignmentMatrix
from dpalign.types.alignment import Origin
from dpalign.types.scoring import GapCostFunction, SimilarityFunction


class WatermanSmithBeyer(Recurrence):
    """Generalized-gap recurrence.

    Every cell scans all gap lengths in both directions::

        H[i][j] = max(0 [local], H[i-1][j-1] + sim(i-1, j-1),
                      max_k H[i-k][j] - gap(k), max_k H[i][j-k] - gap(k))

    which costs O(n * m * (n + m)) because ``gap`` need not be affine. The
    winning ``k`` is stored so traceback can jump the whole run at once;
    ``np.argmax`` returns the first maximum, so the shortest run wins ties.
    """

    name = "waterman_smith_beyer"

    def __init__(self, gap_cost: GapCostFunction, local: bool = True) -> None:
        self.gap_cost = gap_cost
        self.local = local
        self._costs = np.zeros(0, dtype=np.float64)

    def _prepare(self, matrix: AlignmentMatrix, len_s: int, len_t: int) -> None:
        # gap_cost is pure, so evaluate each run length once per call
        longest = max(len_s, len_t)
        self._costs = np.array(
            [self.gap_cost(k) for k in range(1, longest + 1)], dtype=np.float64
        )

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
            # H[i-1][j], H[i-2][j], ..., H[0][j] against gap(1..i)
            scan = matrix.column_view(j)[i - 1 :: -1] - self._costs[:i]
            k = int(np.argmax(scan))
            candidates.append((float(scan[k]), Origin.VERTICAL, k + 1))
        if j > 0:
            scan = matrix.row_view(i)[j - 1 :: -1] - self._costs[:j]
            k = int(np.argmax(scan))
            candidates.append((float(scan[k]), Origin.HORIZONTAL, k + 1))
        return candidates


__all__ = ["WatermanSmithBeyer"]
