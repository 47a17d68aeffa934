"""
dpalign - optimal pairwise sequence alignment.

Global (Needleman-Wunsch), local (Smith-Waterman) and generalized-gap
(Waterman-Smith-Beyer) alignment over caller-supplied scoring functions.

    >>> from dpalign import Aligner, BinarySimilarity
    >>> s, t = "AAGDAXSFXAF", "GDSXFF"
    >>> aligner = Aligner(20, 20)
    >>> result = aligner.needleman_wunsch(BinarySimilarity(s, t), 2, len(s), len(t))
    >>> print(aligner.pretty_printed(s, t))
    AAGDAXSFXAF
      ||  | |||
    --GD--S-XFF
"""

import logging

from .algorithms import Aligner
from .errors import (
    AlignerError,
    CapacityExceededError,
    InternalIndexFault,
    InvalidStateError,
)
from .types import (
    AffineGap,
    AlignmentResult,
    BinarySimilarity,
    ExponentialGap,
    LinearGap,
    Path,
    SubstitutionMatrix,
    dna_full,
)

__version__ = "0.1.0"

# Library stays silent unless the application configures logging
logging.getLogger("dpalign").addHandler(logging.NullHandler())

__all__ = [
    "Aligner",
    "AlignerError",
    "CapacityExceededError",
    "InternalIndexFault",
    "InvalidStateError",
    "AffineGap",
    "AlignmentResult",
    "BinarySimilarity",
    "ExponentialGap",
    "LinearGap",
    "Path",
    "SubstitutionMatrix",
    "dna_full",
]
