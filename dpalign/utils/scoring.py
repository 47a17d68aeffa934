"""Recompute alignment scores from a path."""

from __future__ import annotations

from dpalign.types.alignment import Origin, Path
from dpalign.types.scoring import GapCostFunction, SimilarityFunction


def path_score(
    path: Path, similarity: SimilarityFunction, gap_cost: GapCostFunction
) -> float:
    """Sum of pair similarities minus the cost of every gap run in ``path``.

    Runs are taken from the traceback steps, so two adjacent runs in the
    same direction are charged separately, exactly as the recurrence did.
    """
    total = 0.0
    for step in path.steps:
        if step.origin == Origin.DIAGONAL:
            total += similarity(step.i, step.j)
        elif step.origin in (Origin.VERTICAL, Origin.HORIZONTAL):
            total -= gap_cost(step.length)
    return total


__all__ = ["path_score"]
