"""Helpers shared by the test modules."""

from __future__ import annotations

from typing import List


def normalize(text: str) -> str:
    """Strip every line and drop blank ones, for comparing rendered text."""
    lines: List[str] = [line.strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


def expected(*lines: str) -> str:
    """Join expected rendering lines the way the renderer does."""
    return "\n".join(lines)
