"""Alignment types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, NamedTuple, Optional, Tuple


class Origin(IntEnum):
    """Which predecessor produced the value of a DP cell."""

    START = 0
    DIAGONAL = 1
    VERTICAL = 2  # consumes symbols of the first sequence only
    HORIZONTAL = 3  # consumes symbols of the second sequence only


class Column(NamedTuple):
    """One aligned column; ``None`` marks a gap on that side."""

    i: Optional[int]
    j: Optional[int]

    @property
    def is_pair(self) -> bool:
        return self.i is not None and self.j is not None


class Step(NamedTuple):
    """A traceback move in forward order.

    ``i`` and ``j`` are the coordinates of the cell the move starts from, i.e.
    the number of symbols of each sequence consumed before it.
    """

    origin: Origin
    i: int
    j: int
    length: int

    def columns(self) -> List[Column]:
        if self.origin == Origin.DIAGONAL:
            return [Column(self.i, self.j)]
        if self.origin == Origin.VERTICAL:
            return [Column(self.i + k, None) for k in range(self.length)]
        if self.origin == Origin.HORIZONTAL:
            return [Column(None, self.j + k) for k in range(self.length)]
        return []

    @property
    def end(self) -> Tuple[int, int]:
        if self.origin == Origin.DIAGONAL:
            return self.i + 1, self.j + 1
        if self.origin == Origin.VERTICAL:
            return self.i + self.length, self.j
        if self.origin == Origin.HORIZONTAL:
            return self.i, self.j + self.length
        return self.i, self.j


@dataclass(frozen=True)
class Path:
    """Optimal alignment path between ``start`` and ``end`` matrix cells."""

    steps: Tuple[Step, ...]
    start: Tuple[int, int]
    end: Tuple[int, int]

    def __post_init__(self) -> None:
        cell = self.start
        for step in self.steps:
            if (step.i, step.j) != cell:
                raise ValueError(
                    f"Step {step} does not continue from cell {cell}."
                )
            cell = step.end
        if cell != self.end:
            raise ValueError(f"Steps end at {cell}, expected {self.end}.")

    def __len__(self) -> int:
        return sum(len(step.columns()) for step in self.steps)

    def __iter__(self) -> Iterator[Column]:
        for step in self.steps:
            yield from step.columns()

    @property
    def columns(self) -> List[Column]:
        return list(self)

    def pairs(self) -> List[Tuple[int, int]]:
        """Index pairs of all match/mismatch columns."""
        return [(col.i, col.j) for col in self if col.is_pair]

    @property
    def is_empty(self) -> bool:
        return not self.steps


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment call.

    Attributes:
        score: Optimal score (end cell value for local variants)
        path: Traceback path from the start cell to the end cell
        method: Name of the recurrence that produced the result
    """

    score: float
    path: Path
    method: str


__all__ = ["Origin", "Column", "Step", "Path", "AlignmentResult"]
