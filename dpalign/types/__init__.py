"""Types for the project."""

from .alignment import AlignmentResult, Column, Origin, Path, Step
from .sequence import NamedSequence
from .scoring import (
    AffineGap,
    BinarySimilarity,
    ExponentialGap,
    GapCostFunction,
    LinearGap,
    SimilarityFunction,
    SubstitutionMatrix,
    dna_full,
)


__all__ = [
    "AlignmentResult",
    "Column",
    "Origin",
    "Path",
    "Step",
    "NamedSequence",
    "AffineGap",
    "BinarySimilarity",
    "ExponentialGap",
    "GapCostFunction",
    "LinearGap",
    "SimilarityFunction",
    "SubstitutionMatrix",
    "dna_full",
    "parameters",
]
