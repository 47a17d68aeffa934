"""Alignment recurrences and the engine that runs them."""

from .aligner import Aligner
from .affine import AffineGapRecurrence
from .base import Recurrence
from .matrix import AlignmentMatrix
from .needleman_wunsch import NeedlemanWunsch
from .smith_waterman import SmithWaterman
from .traceback import traceback
from .waterman_smith_beyer import WatermanSmithBeyer


__all__ = [
    "Aligner",
    "AffineGapRecurrence",
    "AlignmentMatrix",
    "NeedlemanWunsch",
    "Recurrence",
    "SmithWaterman",
    "WatermanSmithBeyer",
    "traceback",
]
