"""Utility functions for the project."""

from .formatting import pretty_print, strip_gaps
from .scoring import path_score
from .serialization import (
    load_scoring_config,
    save_scoring_config,
    scoring_config_from_dict,
    scoring_config_to_dict,
)

__all__ = [
    "pretty_print",
    "strip_gaps",
    "path_score",
    "load_scoring_config",
    "save_scoring_config",
    "scoring_config_from_dict",
    "scoring_config_to_dict",
]
