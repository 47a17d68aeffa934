"""Serialization utilities for scoring configuration (load and save)."""

from __future__ import annotations

from dataclasses import asdict, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from dpalign.types.parameters import GapConfig, ScoringConfig, SimilarityConfig

_SCORING_KEYS = ("method", "similarity", "gap", "capacity", "local")


def _convert_values(value: Any, precision: int | None) -> Any:
    """
    Recursively convert dataclasses/dicts/lists and optionally round floats.
    """
    if is_dataclass(value):
        return _convert_values(asdict(value), precision)
    if isinstance(value, dict):
        return {
            key: _convert_values(val, precision)
            for key, val in value.items()
            if val is not None
        }
    if isinstance(value, list):
        return [_convert_values(item, precision) for item in value]
    if isinstance(value, float) and precision is not None:
        return round(value, precision)
    return value


def scoring_config_to_dict(
    config: ScoringConfig, float_precision: int | None = 6
) -> Dict[str, Any]:
    """
    Convert ScoringConfig into a plain dictionary suitable for YAML.
    """
    return _convert_values(config, float_precision)


def _check_section_keys(name: str, section: Any, config_type: type) -> None:
    if not isinstance(section, dict):
        raise ValueError(f"{name} config must be a mapping, got {section!r}")
    allowed = {f.name for f in fields(config_type)}
    unexpected = [key for key in section if key not in allowed]
    if unexpected:
        raise ValueError(f"{name} config has unexpected keys: {unexpected}")


def scoring_config_from_dict(payload: Dict[str, Any]) -> ScoringConfig:
    """Build a ScoringConfig from a parsed YAML mapping."""
    params = payload.get("scoring", payload)
    unexpected = [key for key in params if key not in _SCORING_KEYS]
    if unexpected:
        raise ValueError(f"scoring config has unexpected keys: {unexpected}")
    if "method" not in params:
        raise ValueError("scoring config missing keys: ['method']")

    similarity = params.get("similarity") or {}
    gap = params.get("gap") or {}
    _check_section_keys("similarity", similarity, SimilarityConfig)
    _check_section_keys("gap", gap, GapConfig)

    return ScoringConfig(
        method=params["method"],
        similarity=SimilarityConfig(**similarity),
        gap=GapConfig(**gap),
        capacity=params.get("capacity", 1000),
        local=params.get("local", True),
    )


def load_scoring_config(yaml_path: Path) -> ScoringConfig:
    """Load scoring configuration from a YAML file."""
    with yaml_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    return scoring_config_from_dict(payload)


def save_scoring_config(config: ScoringConfig, yaml_path: Path) -> None:
    """Write scoring configuration to a YAML file."""
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(
            {"scoring": scoring_config_to_dict(config)}, handle, sort_keys=False
        )


__all__ = [
    "scoring_config_to_dict",
    "scoring_config_from_dict",
    "load_scoring_config",
    "save_scoring_config",
]
