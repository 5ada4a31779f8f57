"""Pydantic v2 models for windimpact."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class Coordinate(BaseModel):
    """A geographic point in decimal degrees."""

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


def bearing_between(point_a: Coordinate, point_b: Coordinate) -> float:
    """Compute great-circle initial bearing from point_a to point_b in degrees [0, 360)."""
    lat1 = math.radians(point_a.lat)
    lat2 = math.radians(point_b.lat)
    dlon = math.radians(point_b.lon - point_a.lon)

    x = math.sin(dlon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    return math.degrees(math.atan2(x, y)) % 360


class CyclingPath(BaseModel):
    """A planned ride as an ordered list of coordinates."""

    name: str
    coordinates: list[Coordinate] = Field(default_factory=list)

    @property
    def coordinate_angles(self) -> list[int]:
        """Whole-degree heading of each segment between consecutive coordinates."""
        return [
            round(bearing_between(a, b)) % 360
            for a, b in zip(self.coordinates, self.coordinates[1:])
        ]

    def average_coordinate(self) -> Optional[Coordinate]:
        """Representative location for the path, or None when it has no coordinates."""
        if not self.coordinates:
            return None
        n = len(self.coordinates)
        return Coordinate(
            lat=sum(c.lat for c in self.coordinates) / n,
            lon=sum(c.lon for c in self.coordinates) / n,
        )


class WindObservation(BaseModel):
    """Single wind reading for a path's representative location."""

    direction_deg: int = Field(ge=0, lt=360)  # direction the wind blows from
    speed: float = Field(ge=0)
    temperature: float


# --- Analysis result models ---


class SegmentWindImpact(BaseModel):
    """Wind effect on one path segment, as whole-number percentages."""

    relative_angle_deg: float = Field(ge=0, lt=360)
    headwind_pct: float = Field(ge=0, le=100)
    tailwind_pct: float = Field(ge=0, le=100)
    crosswind_pct: float = Field(ge=0, le=100)


class PathWindImpact(BaseModel):
    """Mean wind effect across a whole path."""

    temperature: float
    wind_speed: float = Field(ge=0)
    headwind_pct: float = Field(ge=0, le=100)
    tailwind_pct: float = Field(ge=0, le=100)
    crosswind_pct: float = Field(ge=0, le=100)


class WindImpactAnalysis(BaseModel):
    """Complete analysis for a path: per-segment impacts plus the summary."""

    path_name: str
    observation: WindObservation
    segments: list[SegmentWindImpact]
    summary: PathWindImpact
    computed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
