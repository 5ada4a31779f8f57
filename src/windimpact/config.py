"""Path configuration loading from YAML, plus environment settings."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from windimpact.models import Coordinate, CyclingPath

CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"

DEFAULT_UNITS = "metric"


def _load_paths_file(config_dir: Path | None) -> dict:
    config_dir = config_dir or CONFIG_DIR
    paths_file = config_dir / "paths.yaml"

    with open(paths_file) as f:
        data = yaml.safe_load(f) or {}

    return data.get("paths", {}) or {}


def load_path(name: str, config_dir: Path | None = None) -> CyclingPath:
    """Load a named path from paths.yaml.

    Args:
        name: Path key in paths.yaml.
        config_dir: Override for config directory (testing).
    """
    paths = _load_paths_file(config_dir)
    if name not in paths:
        available = ", ".join(paths.keys())
        raise KeyError(f"Path '{name}' not found. Available: {available}")

    p = paths[name]
    return CyclingPath(
        name=p.get("name", name),
        coordinates=[Coordinate(lat=lat, lon=lon) for lat, lon in p.get("coordinates", [])],
    )


def list_paths(config_dir: Path | None = None) -> list[str]:
    """List available path names."""
    return list(_load_paths_file(config_dir).keys())


def get_api_key() -> str | None:
    """OpenWeatherMap API key from the environment."""
    return os.environ.get("OPENWEATHERMAP_API_KEY")


def get_units() -> str:
    """Units requested from the provider (passed through unchanged)."""
    return os.environ.get("WINDIMPACT_UNITS", DEFAULT_UNITS)


def get_data_dir() -> Path | None:
    """Results directory override, if configured."""
    value = os.environ.get("WINDIMPACT_DATA_DIR")
    return Path(value) if value else None
