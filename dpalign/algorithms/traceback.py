"""Traceback over stored cell origins."""

from __future__ import annotations

from typing import List, Tuple

from dpalign.algorithms.matrix import AlignmentMatrix
from dpalign.errors import InternalIndexFault
from dpalign.types.alignment import Origin, Path, Step


def _predecessor(i: int, j: int, origin: Origin, length: int) -> Tuple[int, int]:
    if origin == Origin.DIAGONAL:
        return i - 1, j - 1
    if origin == Origin.VERTICAL:
        return i - length, j
    return i, j - length


def traceback(matrix: AlignmentMatrix, end: Tuple[int, int], local: bool) -> Path:
    """Walk origins back from ``end`` and return the path in forward order.

    A local walk stops at the first START cell. A global walk must reach
    ``(0, 0)``. Every move consumes at least one symbol, so more than
    ``i + j`` moves means the matrix is corrupt.
    """
    i, j = end
    limit = i + j
    steps: List[Step] = []

    while True:
        origin, length = matrix.origin(i, j)
        if origin == Origin.START:
            if not local and (i, j) != (0, 0):
                raise InternalIndexFault(
                    f"Global traceback stopped at ({i}, {j}) instead of (0, 0)"
                )
            break
        if len(steps) >= limit:
            raise InternalIndexFault(
                f"Traceback from {end} did not terminate within {limit} steps"
            )
        prev_i, prev_j = _predecessor(i, j, origin, length)
        if length < 1 or prev_i < 0 or prev_j < 0:
            raise InternalIndexFault(
                f"Origin {origin.name} (length {length}) at ({i}, {j}) "
                f"points outside the matrix"
            )
        steps.append(Step(origin, prev_i, prev_j, length))
        i, j = prev_i, prev_j

    steps.reverse()
    return Path(steps=tuple(steps), start=(i, j), end=tuple(end))


__all__ = ["traceback"]
