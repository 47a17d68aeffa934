#!/usr/bin/env python3
"""Plot the DP score matrix of one alignment with its traceback path."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # pylint: disable=C0413

# Ensure repo importability
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dpalign import Aligner  # pylint: disable=C0413
from dpalign.types import Path as AlignmentPath  # pylint: disable=C0413
from dpalign.types.alignment import Origin  # pylint: disable=C0413
from dpalign.utils import load_scoring_config  # pylint: disable=C0413
from scripts.constants import (  # pylint: disable=C0413
    DEMO_SEQUENCES,
    MATRIX_FIGURES_FOLDER,
    PATH_COLORS,
    PLOT_DPI,
    PLOT_TITLE_FONTSIZE,
    PLOT_XLABEL_FONTSIZE,
    PLOT_YLABEL_FONTSIZE,
    SCORING_YAML,
)


def plot_matrix(
    values: np.ndarray,
    path: AlignmentPath,
    s: str,
    t: str,
    out_path: Path,
    title: str,
    dpi: int = PLOT_DPI,
) -> Path:
    """Save a heatmap of ``values`` with the path cells marked."""
    fig, ax = plt.subplots(1, 1, figsize=(max(4, len(t) * 0.4), max(4, len(s) * 0.4)))
    im = ax.imshow(values, origin="upper", aspect="auto", cmap="viridis")
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label="H[i][j]")

    ax.set_xticks(range(len(t) + 1))
    ax.set_xticklabels([""] + list(t))
    ax.set_yticks(range(len(s) + 1))
    ax.set_yticklabels([""] + list(s))
    ax.set_xlabel("j (position in second sequence)", fontsize=PLOT_XLABEL_FONTSIZE)
    ax.set_ylabel("i (position in first sequence)", fontsize=PLOT_YLABEL_FONTSIZE)
    ax.set_title(title, fontsize=PLOT_TITLE_FONTSIZE)

    pairs = [step.end for step in path.steps if step.origin == Origin.DIAGONAL]
    gaps = [step.end for step in path.steps if step.origin != Origin.DIAGONAL]
    if pairs:
        ax.scatter(
            [j for _, j in pairs],
            [i for i, _ in pairs],
            c=PATH_COLORS["pair"],
            edgecolors="black",
            s=24,
            marker="o",
            label="pair",
        )
    if gaps:
        ax.scatter(
            [j for _, j in gaps],
            [i for i, _ in gaps],
            c=PATH_COLORS["gap"],
            s=24,
            marker="x",
            label="gap run end",
        )
    if pairs or gaps:
        ax.legend(loc="lower left")

    plt.tight_layout()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path = out_path.with_suffix(".png")
    plt.savefig(out_path, dpi=dpi)
    plt.close(fig)
    return out_path


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot an alignment DP matrix.")
    parser.add_argument("sequences", nargs="*", metavar="SEQ")
    parser.add_argument("-c", "--config", type=Path, default=SCORING_YAML)
    parser.add_argument("-o", "--output", type=Path, default=None)
    args = parser.parse_args()

    if args.sequences and len(args.sequences) != 2:
        parser.error("expected exactly two sequences")
    s, t = args.sequences if args.sequences else DEMO_SEQUENCES

    config = load_scoring_config(args.config)
    aligner = Aligner(len(s), len(t))
    result = aligner.align(config, s, t)

    out_path = args.output or MATRIX_FIGURES_FOLDER / f"{config.method}_{s}_{t}"
    saved = plot_matrix(
        aligner.matrix_values(),
        result.path,
        s,
        t,
        out_path,
        title=f"{config.method} (score {result.score:g})",
    )
    print(f"Saved: {saved}")


if __name__ == "__main__":
    main()
