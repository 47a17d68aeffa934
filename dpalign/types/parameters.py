"""
Configuration types for the demonstration programs: which recurrence to run,
how to score symbol pairs and how to charge gaps. Each dataclass validates its
keys on construction and can build the scoring callables it describes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .scoring import (
    AffineGap,
    BinarySimilarity,
    ExponentialGap,
    GapCostFunction,
    LinearGap,
    SimilarityFunction,
    dna_full,
)

ALIGNMENT_METHODS: Tuple[str, ...] = (
    "needleman_wunsch",
    "smith_waterman",
    "waterman_smith_beyer",
    "affine_gap",
)
SIMILARITY_KINDS: Tuple[str, ...] = ("binary", "dnafull")
GAP_KINDS: Tuple[str, ...] = ("linear", "affine", "exponential")
LINEAR_METHODS: Tuple[str, ...] = ("needleman_wunsch", "smith_waterman")


def _validate_choice(value: str, allowed: Sequence[str], context: str) -> None:
    if value not in allowed:
        raise ValueError(f"{context} must be one of {list(allowed)}, got '{value}'")


@dataclass(frozen=True)
class SimilarityConfig:
    """Symbol-pair scoring: binary match/mismatch or the DNAFull table."""

    kind: str = "binary"
    match: float = 1
    mismatch: float = -1

    def __post_init__(self) -> None:
        _validate_choice(self.kind, SIMILARITY_KINDS, "similarity kind")

    def build(self, s: Sequence[str], t: Sequence[str]) -> SimilarityFunction:
        if self.kind == "dnafull":
            return dna_full(s, t)
        return BinarySimilarity(s, t, self.match, self.mismatch)


@dataclass(frozen=True)
class GapConfig:
    """Gap-run cost parameters."""

    kind: str = "linear"
    per_unit: float = 1
    opening: Optional[float] = None
    extension: Optional[float] = None
    base: Optional[float] = None

    def __post_init__(self) -> None:
        _validate_choice(self.kind, GAP_KINDS, "gap kind")
        if self.kind == "affine" and (self.opening is None or self.extension is None):
            raise ValueError("affine gap requires 'opening' and 'extension'")
        if self.kind == "exponential" and self.base is None:
            raise ValueError("exponential gap requires 'base'")

    def build(self) -> GapCostFunction:
        if self.kind == "affine":
            return AffineGap(self.opening, self.extension)
        if self.kind == "exponential":
            return ExponentialGap(self.base)
        return LinearGap(self.per_unit)


@dataclass(frozen=True)
class ScoringConfig:
    """Aggregate configuration for one alignment run."""

    method: str
    similarity: SimilarityConfig
    gap: GapConfig
    capacity: int = 1000
    local: bool = True

    def __post_init__(self) -> None:
        _validate_choice(self.method, ALIGNMENT_METHODS, "method")
        if self.method in LINEAR_METHODS and self.gap.kind != "linear":
            raise ValueError(
                f"{self.method} requires a linear gap, got '{self.gap.kind}'"
            )
        if self.method == "affine_gap" and self.gap.kind != "affine":
            raise ValueError(f"affine_gap requires an affine gap, got '{self.gap.kind}'")
        if self.capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {self.capacity}")


__all__ = [
    "ALIGNMENT_METHODS",
    "SIMILARITY_KINDS",
    "GAP_KINDS",
    "SimilarityConfig",
    "GapConfig",
    "ScoringConfig",
]
