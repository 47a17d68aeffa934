"""
Scoring functions for pairwise alignment.

A score model is a pair of pure callables: ``similarity(i, j)`` scores aligning
symbol ``i`` of the first sequence with symbol ``j`` of the second, and
``gap_cost(n)`` is the (positive) cost of a contiguous gap run of length
``n >= 1``. The engine only calls them; it never inspects the sequences, so any
callable with these signatures works. The classes below cover the common cases.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Sequence, Tuple

SimilarityFunction = Callable[[int, int], float]
GapCostFunction = Callable[[int], float]

DNAFULL_ALPHABET: str = "ATGCSWRYKMBVHDN"
DNAFULL_SCORES: Tuple[Tuple[int, ...], ...] = (
    (5, -4, -4, -4, -4, 1, 1, -4, -4, 1, -4, -1, -1, -1, -2),
    (-4, 5, -4, -4, -4, 1, -4, 1, 1, -4, -1, -4, -1, -1, -2),
    (-4, -4, 5, -4, 1, -4, 1, -4, 1, -4, -1, -1, -4, -1, -2),
    (-4, -4, -4, 5, 1, -4, -4, 1, -4, 1, -1, -1, -1, -4, -2),
    (-4, -4, 1, 1, -1, -4, -2, -2, -2, -2, -1, -1, -3, -3, -1),
    (1, 1, -4, -4, -4, -1, -2, -2, -2, -2, -3, -3, -1, -1, -1),
    (1, -4, 1, -4, -2, -2, -1, -4, -2, -2, -3, -1, -3, -1, -1),
    (-4, 1, -4, 1, -2, -2, -4, -1, -2, -2, -1, -3, -1, -3, -1),
    (-4, 1, 1, -4, -2, -2, -2, -2, -1, -4, -1, -3, -3, -1, -1),
    (1, -4, -4, 1, -2, -2, -2, -2, -4, -1, -3, -1, -1, -3, -1),
    (-4, -1, -1, -1, -1, -3, -3, -1, -1, -3, -1, -2, -2, -2, -1),
    (-1, -4, -1, -1, -1, -3, -1, -3, -3, -1, -2, -1, -2, -2, -1),
    (-1, -1, -4, -1, -3, -1, -3, -1, -3, -1, -2, -2, -1, -2, -1),
    (-1, -1, -1, -4, -3, -1, -1, -3, -1, -3, -2, -2, -2, -1, -1),
    (-2, -2, -2, -2, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),
)


@dataclass(frozen=True)
class BinarySimilarity:
    """Score ``match`` for identical symbols and ``mismatch`` otherwise."""

    s: Sequence[str]
    t: Sequence[str]
    match: float = 1
    mismatch: float = -1

    def __call__(self, i: int, j: int) -> float:
        return self.match if self.s[i] == self.t[j] else self.mismatch


@dataclass(frozen=True)
class SubstitutionMatrix:
    """Similarity looked up in a square table indexed by symbol."""

    s: Sequence[str]
    t: Sequence[str]
    alphabet: str
    scores: Tuple[Tuple[float, ...], ...]
    _lookup: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        size = len(self.alphabet)
        if len(set(self.alphabet)) != size:
            raise ValueError(f"Alphabet has duplicate symbols: {self.alphabet!r}")
        if len(self.scores) != size or any(len(row) != size for row in self.scores):
            raise ValueError(
                f"Score table must be {size}x{size} to match alphabet "
                f"{self.alphabet!r}"
            )
        object.__setattr__(
            self, "_lookup", {symbol: k for k, symbol in enumerate(self.alphabet)}
        )

    def _index(self, symbol: str, arg_name: str) -> int:
        try:
            return self._lookup[symbol]
        except KeyError:
            raise ValueError(
                f"{arg_name} symbol {symbol!r} not in alphabet {self.alphabet!r}"
            ) from None

    def __call__(self, i: int, j: int) -> float:
        return self.scores[self._index(self.s[i], "s")][self._index(self.t[j], "t")]


def dna_full(s: Sequence[str], t: Sequence[str]) -> SubstitutionMatrix:
    """DNAFull (NUC.4.4) nucleotide similarity, including IUPAC ambiguity codes."""
    return SubstitutionMatrix(s, t, DNAFULL_ALPHABET, DNAFULL_SCORES)


@dataclass(frozen=True)
class LinearGap:
    """Gap cost ``per_unit * n``."""

    per_unit: float

    def __call__(self, n: int) -> float:
        return self.per_unit * n


@dataclass(frozen=True)
class AffineGap:
    """Gap cost ``opening + (n - 1) * extension``; zero for empty runs."""

    opening: float
    extension: float

    def __call__(self, n: int) -> float:
        if n > 0:
            return self.opening + (n - 1) * self.extension
        return 0


@dataclass(frozen=True)
class ExponentialGap:
    """Gap cost ``base ** n``; neither linear nor affine."""

    base: float

    def __call__(self, n: int) -> float:
        return self.base**n


__all__ = [
    "SimilarityFunction",
    "GapCostFunction",
    "DNAFULL_ALPHABET",
    "DNAFULL_SCORES",
    "BinarySimilarity",
    "SubstitutionMatrix",
    "dna_full",
    "LinearGap",
    "AffineGap",
    "ExponentialGap",
]
