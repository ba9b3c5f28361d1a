"""
GPX-related schemas.

Pydantic models for parsed GPX data. All models are frozen: a parse
result is a value owned by the caller once returned.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def format_utc(value: datetime) -> str:
    """Render a UTC datetime as ``YYYY-MM-DDTHH:MM:SSZ``."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class GeoPoint(BaseModel):
    """Validated coordinate with optional elevation."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    elevation: Optional[float] = None

    def to_map_point(self) -> dict:
        """Point in the shape the map viewer expects."""
        data = {"lat": self.latitude, "lng": self.longitude}
        if self.elevation is not None:
            data["elevation"] = self.elevation
        return data


class TimedPoint(GeoPoint):
    """Track or route point; timestamp is UTC, whole seconds."""

    time: Optional[datetime] = None


class Track(BaseModel):
    """One recorded segment (one per <trkseg>)."""

    model_config = ConfigDict(frozen=True)

    name: str
    points: Tuple[TimedPoint, ...]


class Route(BaseModel):
    """A planned (non-recorded) path."""

    model_config = ConfigDict(frozen=True)

    name: str
    points: Tuple[TimedPoint, ...]


class Waypoint(GeoPoint):
    """Independent point of interest."""

    name: Optional[str] = None

    def to_map_point(self) -> dict:
        data = super().to_map_point()
        if self.name is not None:
            data["name"] = self.name
        return data


class GPXMetadata(BaseModel):
    """
    Summary record persisted alongside an uploaded GPX file.

    Distance is rounded to 2 decimals and elevations to whole meters;
    optional fields are None when the file carries no usable data.
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    distance_meters: float = Field(serialization_alias="distance")
    waypoint_count: int = Field(serialization_alias="waypoints")

    # Elevation
    elevation_gain_m: Optional[int] = Field(default=None, serialization_alias="elevationGain")
    elevation_loss_m: Optional[int] = Field(default=None, serialization_alias="elevationLoss")
    max_elevation_m: Optional[int] = Field(default=None, serialization_alias="maxElevation")
    min_elevation_m: Optional[int] = Field(default=None, serialization_alias="minElevation")

    # Time
    duration_seconds: Optional[int] = Field(default=None, serialization_alias="duration")
    start_time: Optional[datetime] = Field(default=None, serialization_alias="startTime")
    end_time: Optional[datetime] = Field(default=None, serialization_alias="endTime")

    @field_serializer("start_time", "end_time")
    def _serialize_time(self, value: Optional[datetime]) -> Optional[str]:
        return format_utc(value) if value is not None else None

    @property
    def distance_km(self) -> float:
        return round(self.distance_meters / 1000, 2)

    def to_record(self) -> dict:
        """File-metadata record (camelCase keys, absent fields omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class KeyPointRole(str, Enum):
    """Position of a key point along the trip."""
    START = "start"
    INTERMEDIATE = "intermediate"
    END = "end"


class KeyPoint(BaseModel):
    """Distance-downsampled representative point."""

    model_config = ConfigDict(frozen=True)

    point: GeoPoint
    distance_from_start_km: float
    role: KeyPointRole
    label: str


class ParseResult(BaseModel):
    """
    Root aggregate returned by the parser.

    ``dropped_points`` counts point elements rejected during decoding;
    it is diagnostic only and not part of the record or map payloads.
    """

    model_config = ConfigDict(frozen=True)

    tracks: Tuple[Track, ...] = ()
    routes: Tuple[Route, ...] = ()
    waypoints: Tuple[Waypoint, ...] = ()
    metadata: GPXMetadata
    dropped_points: int = 0

    @property
    def is_empty(self) -> bool:
        """True when nothing usable was found in the file."""
        return not (self.tracks or self.routes or self.waypoints)

    def all_points(self) -> list[TimedPoint]:
        """Track points followed by route points, in traversal order."""
        points: list[TimedPoint] = []
        for track in self.tracks:
            points.extend(track.points)
        for route in self.routes:
            points.extend(route.points)
        return points

    def to_map_data(self) -> dict:
        """Payload for the map viewer: tracks, routes and waypoints."""
        return {
            "tracks": [
                {"name": t.name, "points": [p.to_map_point() for p in t.points]}
                for t in self.tracks
            ],
            "routes": [
                {"name": r.name, "points": [p.to_map_point() for p in r.points]}
                for r in self.routes
            ],
            "waypoints": [w.to_map_point() for w in self.waypoints],
        }
