"""Unit tests for the three-line alignment renderer."""

from __future__ import annotations

import random

import pytest

from dpalign.algorithms.aligner import Aligner
from dpalign.types.alignment import Origin, Path, Step
from dpalign.types.scoring import AffineGap, BinarySimilarity
from dpalign.utils.formatting import pretty_print, strip_gaps
from tests.utils import expected


def _build_path(*steps: Step) -> Path:
    start = (steps[0].i, steps[0].j) if steps else (0, 0)
    end = steps[-1].end if steps else start
    return Path(steps=tuple(steps), start=start, end=end)


def test_empty_path_prints_t_then_s_against_gaps():
    """Without aligned columns every symbol faces a gap, t first."""
    path = _build_path()
    assert pretty_print(path, "AB", "XYZ") == expected("---AB", "     ", "XYZ--")


def test_mismatched_pairs_are_marked():
    """Every column holding both symbols gets the match marker."""
    path = _build_path(
        Step(Origin.DIAGONAL, 0, 0, 1),
        Step(Origin.DIAGONAL, 1, 1, 1),
    )
    assert pretty_print(path, "AC", "AG") == expected("AC", "||", "AG")


def test_vertical_run_prints_gaps_on_bottom():
    """Symbols of s consumed by a vertical run face gaps."""
    path = _build_path(
        Step(Origin.DIAGONAL, 0, 0, 1),
        Step(Origin.VERTICAL, 1, 1, 2),
        Step(Origin.DIAGONAL, 3, 1, 1),
    )
    assert pretty_print(path, "ABCD", "AD") == expected("ABCD", "|  |", "A--D")


def test_horizontal_run_after_pair_reuses_previous_symbol():
    """A gap in s is printed against the last consumed symbol of s."""
    path = _build_path(
        Step(Origin.DIAGONAL, 0, 0, 1),
        Step(Origin.HORIZONTAL, 1, 1, 1),
        Step(Origin.DIAGONAL, 1, 2, 1),
    )
    assert pretty_print(path, "AC", "ATC") == expected("AAC", "|||", "ATC")


def test_leading_horizontal_run_prints_gaps_on_top():
    """Before any symbol of s is consumed a gap in s prints as gaps."""
    path = _build_path(
        Step(Origin.HORIZONTAL, 0, 0, 2),
        Step(Origin.DIAGONAL, 0, 2, 1),
    )
    assert pretty_print(path, "A", "XYA") == expected("--A", "  |", "XYA")


def test_horizontal_run_after_vertical_run_merges_columns():
    """The last symbol of a vertical run pairs with the following insertion."""
    path = _build_path(
        Step(Origin.VERTICAL, 0, 0, 2),
        Step(Origin.HORIZONTAL, 2, 0, 1),
    )
    assert pretty_print(path, "AB", "X") == expected("AB", " |", "-X")


def test_custom_gap_and_match_characters():
    """Gap and match characters can be overridden."""
    path = _build_path(Step(Origin.DIAGONAL, 1, 0, 1))
    assert pretty_print(path, "AB", "BC", gap=".", match="*") == expected(
        "AB.", " * ", ".BC"
    )


def test_path_longer_than_sequences_is_rejected():
    """Rendering with sequences shorter than the path raises ValueError."""
    path = _build_path(Step(Origin.DIAGONAL, 0, 0, 1), Step(Origin.DIAGONAL, 1, 1, 1))
    with pytest.raises(ValueError):
        pretty_print(path, "A", "AB")


def test_discontinuous_steps_are_rejected():
    """A Path whose steps do not chain raises ValueError."""
    with pytest.raises(ValueError):
        Path(
            steps=(Step(Origin.DIAGONAL, 0, 0, 1), Step(Origin.DIAGONAL, 2, 2, 1)),
            start=(0, 0),
            end=(3, 3),
        )


def test_rendering_round_trips_sequences():
    """Gap-free lines reconstruct t always, and s unless an insertion repeats."""
    rng = random.Random(2020)
    aligner = Aligner(12, 12)
    for _ in range(100):
        s = "".join(rng.choice("ACGT") for _ in range(rng.randint(0, 12)))
        t = "".join(rng.choice("ACGT") for _ in range(rng.randint(0, 12)))
        similarity = BinarySimilarity(s, t, 2, -1)
        method = rng.choice(["nw", "sw", "wsb"])
        if method == "nw":
            result = aligner.needleman_wunsch(similarity, 1, len(s), len(t))
        elif method == "sw":
            result = aligner.smith_waterman(similarity, 1, len(s), len(t))
        else:
            result = aligner.waterman_smith_beyer(
                similarity, AffineGap(3, 1), len(s), len(t)
            )

        top, connector, bottom = aligner.pretty_printed(s, t).split("\n")

        assert len(top) == len(connector) == len(bottom)
        assert strip_gaps(bottom) == t
        repeats = any(
            step.origin == Origin.HORIZONTAL and step.i > 0
            for step in result.path.steps
        )
        if not repeats:
            assert strip_gaps(top) == s
