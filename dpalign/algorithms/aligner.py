"""Alignment engine: owns the DP matrix and the most recent result."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from dpalign.algorithms.affine import AffineGapRecurrence
from dpalign.algorithms.base import Recurrence
from dpalign.algorithms.matrix import AlignmentMatrix
from dpalign.algorithms.needleman_wunsch import NeedlemanWunsch
from dpalign.algorithms.smith_waterman import SmithWaterman
from dpalign.algorithms.traceback import traceback
from dpalign.algorithms.waterman_smith_beyer import WatermanSmithBeyer
from dpalign.errors import InvalidStateError
from dpalign.types.alignment import AlignmentResult, Path
from dpalign.types.parameters import ScoringConfig
from dpalign.types.scoring import GapCostFunction, SimilarityFunction
from dpalign.utils.formatting import pretty_print

logger = logging.getLogger(__name__)


class Aligner:
    """Pairwise aligner with a fixed, preallocated capacity.

    Construct once with the longest sequence lengths you will align, then
    call one of the alignment methods per sequence pair. Each call
    overwrites the previous result. Instances are not thread-safe.

    Example:
        >>> aligner = Aligner(20, 20)
        >>> s, t = "AAGDAXSFXAF", "GDSXFF"
        >>> sim = lambda i, j: 1 if s[i] == t[j] else -1
        >>> aligner.needleman_wunsch(sim, 2, len(s), len(t)).score
        -6.0
    """

    def __init__(self, max_len_s: int, max_len_t: int) -> None:
        self._matrix = AlignmentMatrix(max_len_s, max_len_t)
        self._result: Optional[AlignmentResult] = None

    @property
    def capacity(self) -> Tuple[int, int]:
        """Maximum (len_s, len_t) this engine can align."""
        return self._matrix.capacity

    @property
    def computed(self) -> bool:
        """Whether a result is available."""
        return self._result is not None

    def needleman_wunsch(
        self,
        similarity: SimilarityFunction,
        gap_per_unit: float,
        len_s: int,
        len_t: int,
    ) -> AlignmentResult:
        """Global alignment with a linear gap cost of ``gap_per_unit``."""
        return self._run(NeedlemanWunsch(gap_per_unit), similarity, len_s, len_t)

    def smith_waterman(
        self,
        similarity: SimilarityFunction,
        gap_per_unit: float,
        len_s: int,
        len_t: int,
    ) -> AlignmentResult:
        """Local alignment with a linear gap cost of ``gap_per_unit``."""
        return self._run(SmithWaterman(gap_per_unit), similarity, len_s, len_t)

    def waterman_smith_beyer(
        self,
        similarity: SimilarityFunction,
        gap_cost: GapCostFunction,
        len_s: int,
        len_t: int,
        local: bool = True,
    ) -> AlignmentResult:
        """Alignment with an arbitrary gap cost ``gap_cost(n)``.

        Local by default; pass ``local=False`` for the global variant.
        """
        return self._run(WatermanSmithBeyer(gap_cost, local), similarity, len_s, len_t)

    def affine_gap(
        self,
        similarity: SimilarityFunction,
        opening: float,
        extension: float,
        len_s: int,
        len_t: int,
        local: bool = True,
    ) -> AlignmentResult:
        """Same result as :meth:`waterman_smith_beyer` with an affine gap, in O(n * m)."""
        return self._run(
            AffineGapRecurrence(opening, extension, local), similarity, len_s, len_t
        )

    def align(
        self, config: ScoringConfig, s: Sequence[str], t: Sequence[str]
    ) -> AlignmentResult:
        """Run the method named in ``config`` on two concrete sequences."""
        similarity = config.similarity.build(s, t)
        gap = config.gap
        if config.method == "needleman_wunsch":
            return self.needleman_wunsch(similarity, gap.per_unit, len(s), len(t))
        if config.method == "smith_waterman":
            return self.smith_waterman(similarity, gap.per_unit, len(s), len(t))
        if config.method == "affine_gap":
            return self.affine_gap(
                similarity, gap.opening, gap.extension, len(s), len(t), config.local
            )
        return self.waterman_smith_beyer(
            similarity, gap.build(), len(s), len(t), config.local
        )

    def _run(
        self,
        recurrence: Recurrence,
        similarity: SimilarityFunction,
        len_s: int,
        len_t: int,
    ) -> AlignmentResult:
        self._matrix.check_capacity(len_s, len_t)
        self._result = None
        self._matrix.reset(len_s, len_t)

        score, end = recurrence.fill(self._matrix, similarity, len_s, len_t)
        path = traceback(self._matrix, end, recurrence.local)

        self._result = AlignmentResult(score=score, path=path, method=recurrence.name)
        logger.debug(
            "%s: %dx%d, score=%s, path %s -> %s",
            recurrence.name,
            len_s,
            len_t,
            score,
            path.start,
            path.end,
        )
        return self._result

    def result(self) -> AlignmentResult:
        """Score, path and method name of the most recent alignment."""
        return self._require("result")

    def score(self) -> float:
        """Optimal score of the most recent alignment."""
        return self._require("score").score

    def path(self) -> Path:
        """Traceback path of the most recent alignment."""
        return self._require("path").path

    def pretty_printed(self, s: Sequence[str], t: Sequence[str]) -> str:
        """Three-line rendering of the most recent alignment of ``s`` and ``t``."""
        return pretty_print(self._require("rendering").path, s, t)

    def matrix_values(self) -> np.ndarray:
        """Copy of the score table of the most recent alignment."""
        self._require("matrix values")
        return self._matrix.values.copy()

    def _require(self, what: str) -> AlignmentResult:
        if self._result is None:
            raise InvalidStateError(what)
        return self._result


__all__ = ["Aligner"]
