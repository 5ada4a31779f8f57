"""Headwind/tailwind and crosswind impact computation.

All functions here are pure: they take headings and a wind observation and
return fresh result models.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from windimpact.errors import EmptyPathError
from windimpact.models import PathWindImpact, SegmentWindImpact, WindObservation

logger = logging.getLogger(__name__)

FULL_CIRCLE_DEG = 360

# Open interval bounds (exclusive) for classifying the relative angle
HEADWIND_UPPER_DEG = 90
TAILWIND_UPPER_DEG = 260


def resolve_relative_angle(segment_heading: int, wind_direction: int) -> int:
    """Wind direction re-expressed relative to the segment heading, in [0, 360).

    0 means the wind originates straight along the travel heading. Any integer
    inputs are accepted and normalised.
    """
    return (wind_direction - segment_heading) % FULL_CIRCLE_DEG


def _weight(angle_deg: float) -> float:
    """Half-cosine falloff: 1.0 at 0 degrees, 0.0 at 180 degrees."""
    return (1 + math.cos(math.radians(angle_deg))) / 2


def headwind_percentage(relative_angle: float) -> int:
    """Headwind strength for angles in (260, 360) or (0, 90); 0 elsewhere.

    The exact angles 0, 90 and 260 fall outside both open intervals and give 0.
    """
    if relative_angle > TAILWIND_UPPER_DEG or 0 < relative_angle < HEADWIND_UPPER_DEG:
        return round(_weight(relative_angle) * 100)
    return 0


def tailwind_percentage(relative_angle: float) -> int:
    """Tailwind strength for angles strictly between 90 and 260; 0 elsewhere.

    Peaks at 100 when the wind comes from directly behind (180).
    """
    if HEADWIND_UPPER_DEG < relative_angle < TAILWIND_UPPER_DEG:
        return round((1 - _weight(relative_angle)) * 100)
    return 0


def crosswind_percentage(relative_angle: float) -> int:
    """Crosswind strength: 100 at 90/270, 0 at 0/180."""
    theta = math.radians(relative_angle)
    return round((1 - math.cos(2 * theta)) / 2 * 100)


def compute_segment_impact(segment_heading: int, wind_direction: int) -> SegmentWindImpact:
    """Classify the wind effect for a single segment."""
    angle = resolve_relative_angle(segment_heading, wind_direction)
    return SegmentWindImpact(
        relative_angle_deg=float(angle),
        headwind_pct=float(headwind_percentage(angle)),
        tailwind_pct=float(tailwind_percentage(angle)),
        crosswind_pct=float(crosswind_percentage(angle)),
    )


def compute_segment_impacts(
    headings: Sequence[int], observation: WindObservation
) -> list[SegmentWindImpact]:
    """One SegmentWindImpact per heading, in input order."""
    return [compute_segment_impact(h, observation.direction_deg) for h in headings]


def aggregate_path_impact(
    impacts: Sequence[SegmentWindImpact], observation: WindObservation
) -> PathWindImpact:
    """Unweighted mean of the segment percentages, plus the raw observation values.

    Raises:
        EmptyPathError: if ``impacts`` is empty.
    """
    if not impacts:
        raise EmptyPathError("Cannot aggregate wind impact over a path with no segments")

    n = len(impacts)
    summary = PathWindImpact(
        temperature=observation.temperature,
        wind_speed=observation.speed,
        headwind_pct=sum(i.headwind_pct for i in impacts) / n,
        tailwind_pct=sum(i.tailwind_pct for i in impacts) / n,
        crosswind_pct=sum(i.crosswind_pct for i in impacts) / n,
    )
    logger.debug(
        "Aggregated %d segments: head=%.2f tail=%.2f cross=%.2f",
        n, summary.headwind_pct, summary.tailwind_pct, summary.crosswind_pct,
    )
    return summary
