#!/usr/bin/env python3
"""Align two sequences with a configured method and print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Tuple

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dpalign import Aligner  # pylint: disable=C0413
from dpalign.types.parameters import ALIGNMENT_METHODS  # pylint: disable=C0413
from dpalign.utils import load_scoring_config  # pylint: disable=C0413
from dpalign.utils.fasta import read_fasta  # pylint: disable=C0413
from scripts.constants import DEMO_SEQUENCES, SCORING_YAML  # pylint: disable=C0413


def resolve_sequences(args: argparse.Namespace) -> Tuple[str, str]:
    """Pick the two sequences from FASTA, the command line or the demo default."""
    if args.fasta:
        records = read_fasta(args.fasta)
        if len(records) < 2:
            raise ValueError(
                f"Expected at least 2 records in {args.fasta}, found {len(records)}."
            )
        return str(records[0]), str(records[1])
    if args.sequences:
        return args.sequences[0], args.sequences[1]
    return DEMO_SEQUENCES


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Run a pairwise alignment and print the aligned text."
    )
    parser.add_argument(
        "sequences",
        nargs="*",
        metavar="SEQ",
        help="Two sequences to align (default: the README example).",
    )
    parser.add_argument(
        "-f",
        "--fasta",
        type=str,
        default=None,
        help="FASTA file; the first two records are aligned.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=SCORING_YAML,
        help="YAML scoring configuration.",
    )
    parser.add_argument(
        "-m",
        "--method",
        choices=ALIGNMENT_METHODS,
        default=None,
        help="Override the method named in the configuration.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    if args.sequences and len(args.sequences) != 2:
        parser.error("expected exactly two sequences")

    config = load_scoring_config(args.config)
    if args.method is not None:
        config = replace(config, method=args.method)

    s, t = resolve_sequences(args)
    capacity = max(config.capacity, len(s), len(t))
    aligner = Aligner(capacity, capacity)
    result = aligner.align(config, s, t)

    print(aligner.pretty_printed(s, t))
    print(f"\n{result.method} score: {result.score:g}")


if __name__ == "__main__":
    main()
