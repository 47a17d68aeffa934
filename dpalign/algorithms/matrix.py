"""Preallocated dynamic-programming table shared by all recurrences."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from dpalign.errors import CapacityExceededError
from dpalign.types.alignment import Origin


class AlignmentMatrix:
    """Score, origin and gap-length buffers sized to a fixed capacity.

    Each alignment call works on the logical ``(len_s + 1) x (len_t + 1)``
    sub-rectangle selected by :meth:`reset`; the buffers themselves are never
    reallocated.
    """

    def __init__(self, max_len_s: int, max_len_t: int) -> None:
        if max_len_s < 0 or max_len_t < 0:
            raise ValueError(
                f"Capacity must be non-negative, got ({max_len_s}, {max_len_t})"
            )
        shape = (max_len_s + 1, max_len_t + 1)
        self._values = np.zeros(shape, dtype=np.float64)
        self._origins = np.zeros(shape, dtype=np.int8)
        self._lengths = np.zeros(shape, dtype=np.int64)
        self._capacity = (max_len_s, max_len_t)
        self._shape = (1, 1)
        self._runs: Optional[
            Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]
        ] = None

    @property
    def capacity(self) -> Tuple[int, int]:
        """Maximum supported sequence lengths."""
        return self._capacity

    @property
    def shape(self) -> Tuple[int, int]:
        """Logical dimensions of the current call."""
        return self._shape

    @property
    def values(self) -> np.ndarray:
        """View of the logical score sub-rectangle."""
        rows, cols = self._shape
        return self._values[:rows, :cols]

    def check_capacity(self, len_s: int, len_t: int) -> None:
        if len_s < 0 or len_t < 0:
            raise ValueError(
                f"Sequence lengths must be non-negative, got ({len_s}, {len_t})"
            )
        if len_s > self._capacity[0] or len_t > self._capacity[1]:
            raise CapacityExceededError((len_s, len_t), self._capacity)

    def reset(self, len_s: int, len_t: int) -> None:
        """Select and clear the sub-rectangle for a new call."""
        self.check_capacity(len_s, len_t)
        rows, cols = len_s + 1, len_t + 1
        self._values[:rows, :cols] = 0.0
        self._origins[:rows, :cols] = Origin.START
        self._lengths[:rows, :cols] = 0
        self._shape = (rows, cols)

    def gap_runs(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Cleared vertical/horizontal gap-run tables for the current call.

        Returns ``(vertical, vertical_len, horizontal, horizontal_len)`` views
        of the logical sub-rectangle, scores set to ``-inf`` and lengths to 0.
        The backing buffers are sized to the capacity on first use and reused
        afterwards.
        """
        if self._runs is None:
            full = self._values.shape
            self._runs = (
                np.empty(full, dtype=np.float64),
                np.empty(full, dtype=np.int64),
                np.empty(full, dtype=np.float64),
                np.empty(full, dtype=np.int64),
            )
        rows, cols = self._shape
        views = tuple(buffer[:rows, :cols] for buffer in self._runs)
        vertical, vertical_len, horizontal, horizontal_len = views
        vertical.fill(-np.inf)
        horizontal.fill(-np.inf)
        vertical_len.fill(0)
        horizontal_len.fill(0)
        return vertical, vertical_len, horizontal, horizontal_len

    def set(self, i: int, j: int, value: float, origin: Origin, length: int) -> None:
        self._values[i, j] = value
        self._origins[i, j] = origin
        self._lengths[i, j] = length

    def value(self, i: int, j: int) -> float:
        return float(self._values[i, j])

    def origin(self, i: int, j: int) -> Tuple[Origin, int]:
        """Return the origin tag and gap length stored at ``(i, j)``."""
        return Origin(int(self._origins[i, j])), int(self._lengths[i, j])

    def column_view(self, j: int) -> np.ndarray:
        """Scores ``H[0..rows-1][j]`` of the current call."""
        return self._values[: self._shape[0], j]

    def row_view(self, i: int) -> np.ndarray:
        """Scores ``H[i][0..cols-1]`` of the current call."""
        return self._values[i, : self._shape[1]]


__all__ = ["AlignmentMatrix"]
