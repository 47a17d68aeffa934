"""Three-line text rendering of an alignment path."""

from __future__ import annotations

from typing import List, Optional, Sequence

from dpalign.types.alignment import Origin, Path

GAP_CHAR = "-"
MATCH_CHAR = "|"
BLANK_CHAR = " "


def _anchors(path: Path, len_t: int) -> List[Optional[int]]:
    """Map each index of ``t`` to the index of ``s`` it is printed against.

    Pairs anchor to their partner. A gap in ``s`` anchors to the last symbol
    of ``s`` consumed before it. Symbols of ``t`` outside the path stay free.
    """
    anchors: List[Optional[int]] = [None] * len_t
    for step in path.steps:
        if step.origin == Origin.DIAGONAL:
            anchors[step.j] = step.i
        elif step.origin == Origin.HORIZONTAL:
            anchor = step.i - 1 if step.i > 0 else None
            for offset in range(step.length):
                anchors[step.j + offset] = anchor
    return anchors


def pretty_print(
    path: Path,
    s: Sequence[str],
    t: Sequence[str],
    gap: str = GAP_CHAR,
    match: str = MATCH_CHAR,
) -> str:
    """Render ``path`` as ``s`` over a connector line over ``t``.

    The output always spans both full sequences: symbols outside a local
    window are printed against gaps, the unaligned tail of ``t`` before the
    unaligned tail of ``s``. Every column holding a symbol of each sequence
    gets ``match`` in the connector line, mismatches included.
    """
    if path.end[0] > len(s) or path.end[1] > len(t):
        raise ValueError(
            f"Path ends at {path.end} but sequences have lengths "
            f"({len(s)}, {len(t)})"
        )

    top: List[str] = []
    connector: List[str] = []
    bottom: List[str] = []

    def emit(upper: str, mark: str, lower: str) -> None:
        top.append(upper)
        connector.append(mark)
        bottom.append(lower)

    i = 0
    for j, anchor in enumerate(_anchors(path, len(t))):
        if anchor is None:
            emit(gap, BLANK_CHAR, str(t[j]))
            continue
        while i < anchor:
            emit(str(s[i]), BLANK_CHAR, gap)
            i += 1
        emit(str(s[anchor]), match, str(t[j]))
        i = anchor + 1

    while i < len(s):
        emit(str(s[i]), BLANK_CHAR, gap)
        i += 1

    return "\n".join("".join(line) for line in (top, connector, bottom))


def strip_gaps(line: str, gap: str = GAP_CHAR) -> str:
    """Remove gap characters from one rendered line."""
    return line.replace(gap, "")


__all__ = ["pretty_print", "strip_gaps", "GAP_CHAR", "MATCH_CHAR"]
