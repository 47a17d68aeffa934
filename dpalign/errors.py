"""Exceptions raised by the alignment engine."""

from __future__ import annotations

from typing import Optional


class AlignerError(Exception):
    """Base exception for all dpalign errors.

    Args:
        message: What went wrong.
        suggestion: What the caller can do about it.
    """

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.formatted())

    def formatted(self) -> str:
        """Return the message with the suggestion appended, if any."""
        if self.suggestion:
            return f"{self.message}\n  Suggestion: {self.suggestion}"
        return self.message

    def __str__(self) -> str:
        return self.formatted()


class CapacityExceededError(AlignerError, ValueError):
    """A requested sequence length exceeds the preallocated matrix capacity."""

    def __init__(self, requested: tuple[int, int], capacity: tuple[int, int]):
        super().__init__(
            f"Requested lengths {requested} exceed aligner capacity {capacity}",
            suggestion="Construct the Aligner with larger maximum lengths",
        )
        self.requested = requested
        self.capacity = capacity


class InvalidStateError(AlignerError, RuntimeError):
    """A result was requested before any alignment completed."""

    def __init__(self, what: str):
        super().__init__(
            f"No alignment has been computed; cannot query {what}",
            suggestion="Call needleman_wunsch, smith_waterman or "
            "waterman_smith_beyer first",
        )


class InternalIndexFault(AlignerError, IndexError):
    """Traceback left the matrix or failed to terminate."""


__all__ = [
    "AlignerError",
    "CapacityExceededError",
    "InvalidStateError",
    "InternalIndexFault",
]
