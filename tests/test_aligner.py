"""Unit tests for the Aligner engine state machine and error handling."""

from __future__ import annotations

import logging

import pytest

from dpalign import (
    AlignerError,
    CapacityExceededError,
    InternalIndexFault,
    InvalidStateError,
)
from dpalign.algorithms.aligner import Aligner
from dpalign.algorithms.matrix import AlignmentMatrix
from dpalign.algorithms.traceback import traceback
from dpalign.types.alignment import Origin
from dpalign.types.parameters import GapConfig, ScoringConfig, SimilarityConfig
from dpalign.types.scoring import BinarySimilarity
from tests.utils import expected


def _build_config(method: str, gap: GapConfig, kind: str = "binary") -> ScoringConfig:
    return ScoringConfig(
        method=method,
        similarity=SimilarityConfig(kind=kind, match=2, mismatch=-2),
        gap=gap,
    )


@pytest.mark.parametrize(
    "query",
    [
        lambda a: a.score(),
        lambda a: a.path(),
        lambda a: a.result(),
        lambda a: a.pretty_printed("A", "A"),
        lambda a: a.matrix_values(),
    ],
)
def test_queries_before_alignment_fail(query):
    """Results cannot be queried in the empty state."""
    aligner = Aligner(5, 5)
    assert not aligner.computed
    with pytest.raises(InvalidStateError):
        query(aligner)


def test_capacity_is_checked_before_computing():
    """Oversized requests fail without calling the scoring function."""
    aligner = Aligner(3, 4)

    def similarity(i: int, j: int) -> float:
        raise AssertionError("similarity must not be called")

    with pytest.raises(CapacityExceededError) as excinfo:
        aligner.needleman_wunsch(similarity, 1, 4, 2)
    assert excinfo.value.requested == (4, 2)
    assert excinfo.value.capacity == (3, 4)
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, AlignerError)

    with pytest.raises(CapacityExceededError):
        aligner.waterman_smith_beyer(similarity, lambda n: n, 3, 5)
    assert not aligner.computed


def test_capacity_error_keeps_previous_result():
    """A rejected request leaves the last result queryable."""
    aligner = Aligner(5, 5)
    s, t = "ACG", "AG"
    aligner.needleman_wunsch(BinarySimilarity(s, t), 1, len(s), len(t))

    with pytest.raises(CapacityExceededError):
        aligner.smith_waterman(BinarySimilarity(s, t), 1, 6, 1)

    assert aligner.computed
    assert aligner.score() == 1
    assert aligner.result().method == "needleman_wunsch"


def test_negative_lengths_are_rejected():
    aligner = Aligner(5, 5)
    with pytest.raises(ValueError):
        aligner.smith_waterman(lambda i, j: 1, 1, -1, 2)


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        Aligner(-1, 3)


def test_full_capacity_is_usable():
    """Sequences exactly as long as the capacity are accepted."""
    aligner = Aligner(4, 4)
    s = t = "ACGT"
    result = aligner.needleman_wunsch(BinarySimilarity(s, t), 1, 4, 4)
    assert result.score == 4
    assert aligner.capacity == (4, 4)


def test_later_call_overwrites_result():
    """Each call replaces the previous result, including after a larger call."""
    aligner = Aligner(20, 20)
    s, t = "AAGDAXSFXAF", "GDSXFF"
    aligner.needleman_wunsch(BinarySimilarity(s, t), 2, len(s), len(t))
    assert aligner.score() == -6

    aligner.smith_waterman(BinarySimilarity("GD", "GD"), 1, 2, 2)

    assert aligner.score() == 2
    assert aligner.result().method == "smith_waterman"
    assert aligner.matrix_values().shape == (3, 3)
    assert aligner.pretty_printed("GD", "GD") == expected("GD", "||", "GD")


def test_failing_similarity_leaves_engine_empty():
    """Exceptions from scoring callbacks propagate and drop the old result."""
    aligner = Aligner(5, 5)
    aligner.needleman_wunsch(lambda i, j: 1, 1, 2, 2)

    def similarity(i: int, j: int) -> float:
        raise KeyError("unknown symbol")

    with pytest.raises(KeyError):
        aligner.smith_waterman(similarity, 1, 2, 2)
    assert not aligner.computed


def test_alignment_logs_debug_summary(caplog):
    """Each call emits one DEBUG record naming the method."""
    aligner = Aligner(5, 5)
    with caplog.at_level(logging.DEBUG, logger="dpalign.algorithms.aligner"):
        aligner.smith_waterman(BinarySimilarity("AC", "AC"), 1, 2, 2)
    assert any("smith_waterman" in record.getMessage() for record in caplog.records)


def test_align_dispatches_on_config():
    """align() runs the configured method on concrete sequences."""
    aligner = Aligner(20, 20)
    s, t = "AAGDAXSFXAF", "GDSXFF"

    result = aligner.align(
        _build_config("smith_waterman", GapConfig(kind="linear", per_unit=1)), s, t
    )
    assert result.method == "smith_waterman"
    assert result.score == 6

    result = aligner.align(
        _build_config(
            "waterman_smith_beyer", GapConfig(kind="affine", opening=5, extension=1),
            kind="dnafull",
        ),
        "TACGGGCCCGCTAC",
        "TAGCCCTATCGGTCA",
    )
    assert result.score == 27

    result = aligner.align(
        _build_config("affine_gap", GapConfig(kind="affine", opening=5, extension=1), kind="dnafull"),
        "TACGGGCCCGCTAC",
        "TAGCCCTATCGGTCA",
    )
    assert result.method == "affine_gap"
    assert result.score == 27


def test_traceback_rejects_global_start_away_from_origin():
    """A START cell inside a global path is an internal fault."""
    matrix = AlignmentMatrix(2, 2)
    matrix.reset(2, 2)
    matrix.set(2, 2, 1.0, Origin.DIAGONAL, 1)

    with pytest.raises(InternalIndexFault):
        traceback(matrix, (2, 2), local=False)

    path = traceback(matrix, (2, 2), local=True)
    assert path.start == (1, 1)


def test_traceback_rejects_jumps_outside_matrix():
    """A gap length reaching past row 0 is an internal fault."""
    matrix = AlignmentMatrix(2, 2)
    matrix.reset(2, 2)
    matrix.set(2, 2, 1.0, Origin.VERTICAL, 3)

    with pytest.raises(InternalIndexFault):
        traceback(matrix, (2, 2), local=True)


def test_traceback_rejects_cycles():
    """A zero-length move would loop forever and is rejected."""
    matrix = AlignmentMatrix(2, 2)
    matrix.reset(2, 2)
    matrix.set(1, 1, 1.0, Origin.HORIZONTAL, 0)

    with pytest.raises(InternalIndexFault):
        traceback(matrix, (1, 1), local=True)
