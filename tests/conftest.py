"""Shared test fixtures."""

from __future__ import annotations

import pytest

from windimpact.models import Coordinate, CyclingPath, WindObservation


@pytest.fixture
def sample_observation():
    return WindObservation(direction_deg=0, speed=5.0, temperature=20.0)


@pytest.fixture
def sample_path():
    """Square-ish loop: north, east, south, west."""
    return CyclingPath(
        name="Test loop",
        coordinates=[
            Coordinate(lat=53.0, lon=-6.0),
            Coordinate(lat=53.1, lon=-6.0),
            Coordinate(lat=53.1, lon=-5.8),
            Coordinate(lat=53.0, lon=-5.8),
            Coordinate(lat=53.0, lon=-6.0),
        ],
    )


@pytest.fixture
def config_dir(tmp_path):
    """Config directory with a small paths.yaml."""
    (tmp_path / "paths.yaml").write_text(
        "paths:\n"
        "  short:\n"
        "    name: Short ride\n"
        "    coordinates:\n"
        "      - [53.0, -6.0]\n"
        "      - [53.1, -6.0]\n"
        "  empty:\n"
        "    name: Nowhere\n"
        "    coordinates: []\n"
    )
    return tmp_path
