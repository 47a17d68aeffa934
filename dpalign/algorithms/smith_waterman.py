"""Smith-Waterman local alignment with a linear gap cost."""

from __future__ import annotations

from dpalign.algorithms.needleman_wunsch import NeedlemanWunsch


class SmithWaterman(NeedlemanWunsch):
    """Needleman-Wunsch candidates with every cell floored at zero.

    A floored cell is recorded as START, so traceback stops there.
    """

    name = "smith_waterman"
    local = True


__all__ = ["SmithWaterman"]
