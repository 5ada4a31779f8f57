"""Wind impact pipeline — shared by CLI and library callers.

Two layers:
- ``compute_segment_impacts`` / ``compute_full_analysis`` run the pure
  analysis for a path and an observation the caller already holds.
- ``fetch_segment_impacts`` / ``fetch_weather_impact_analysis`` first derive the
  representative coordinate, fetch the observation, then run the analysis.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, Union

from windimpact.analysis import wind
from windimpact.errors import EmptyPathError, InvalidRepresentativeLocation
from windimpact.models import (
    Coordinate,
    CyclingPath,
    PathWindImpact,
    SegmentWindImpact,
    WindImpactAnalysis,
    WindObservation,
)

logger = logging.getLogger(__name__)

PathLike = Union[CyclingPath, Sequence[int]]


class WeatherProvider(Protocol):
    """Anything that can return the current wind at a coordinate."""

    def fetch_observation(self, coordinate: Coordinate) -> WindObservation: ...


def _headings(path: PathLike) -> list[int]:
    """Segment headings for a path, rejecting an empty sequence."""
    headings = path.coordinate_angles if isinstance(path, CyclingPath) else list(path)
    if not headings:
        raise EmptyPathError("Path has no segment headings")
    return headings


def compute_segment_impacts(
    path: PathLike, observation: WindObservation
) -> list[SegmentWindImpact]:
    """Per-segment wind impacts for ``path`` under ``observation``."""
    return wind.compute_segment_impacts(_headings(path), observation)


def compute_full_analysis(
    path: PathLike, observation: WindObservation
) -> tuple[list[SegmentWindImpact], PathWindImpact]:
    """Per-segment impacts and the path-level summary."""
    impacts = wind.compute_segment_impacts(_headings(path), observation)
    return impacts, wind.aggregate_path_impact(impacts, observation)


def _fetch_for_path(path: CyclingPath, provider: WeatherProvider) -> WindObservation:
    """Fetch the observation at the path's representative coordinate.

    Paths without segments are rejected before any request. Provider errors
    propagate unchanged.
    """
    coordinate = path.average_coordinate()
    if coordinate is None:
        raise InvalidRepresentativeLocation(f"Path '{path.name}' has no coordinates")
    _headings(path)
    return provider.fetch_observation(coordinate)


def fetch_segment_impacts(
    path: CyclingPath, provider: WeatherProvider
) -> list[SegmentWindImpact]:
    """Fetch the wind for ``path`` and compute per-segment impacts."""
    observation = _fetch_for_path(path, provider)
    return compute_segment_impacts(path, observation)


def fetch_weather_impact_analysis(
    path: CyclingPath, provider: WeatherProvider
) -> WindImpactAnalysis:
    """Fetch the wind for ``path`` and run the full analysis."""
    observation = _fetch_for_path(path, provider)
    return analyze_path(path, observation)


def analyze_path(path: CyclingPath, observation: WindObservation) -> WindImpactAnalysis:
    """Full analysis for a path and an observation the caller already holds."""
    segments, summary = compute_full_analysis(path, observation)
    logger.debug(
        "Analyzed '%s': %d segments, wind %d deg @ %.1f",
        path.name, len(segments), observation.direction_deg, observation.speed,
    )
    return WindImpactAnalysis(
        path_name=path.name,
        observation=observation,
        segments=segments,
        summary=summary,
    )
