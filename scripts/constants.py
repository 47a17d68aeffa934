"""Constants for the project."""

from pathlib import Path
from typing import Dict

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Configuration
# ============================================================================
CONFIG_FOLDER = PROJECT_ROOT / "config"
SCORING_YAML = CONFIG_FOLDER / "scoring.yaml"

# ============================================================================
# Results directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"

# DP matrix heatmaps (from plot_matrix.py)
MATRIX_FIGURES_FOLDER = RESULTS_FOLDER / "matrices"

# ============================================================================
# Demo defaults
# ============================================================================
DEMO_SEQUENCES = ("CHOCOLATEISTHEANSWER", "LATETHAW")

# ============================================================================
# Plot styling
# ============================================================================
PATH_COLORS: Dict[str, str] = {
    "pair": "#ffffff",
    "gap": "#A23B72",
}
PLOT_DPI = 300
PLOT_XLABEL_FONTSIZE = 12
PLOT_YLABEL_FONTSIZE = 12
PLOT_TITLE_FONTSIZE = 14
