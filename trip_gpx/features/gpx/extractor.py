"""
Geometry extraction.

Walks tracks/segments, routes and waypoints of a decoded <gpx> root.
Distance and elevation are accumulated globally over the whole file
(all tracks and routes together), treating one file as one trip. Time
bounds come from track points only. State lives in a
GeometryAccumulator passed through the walk, so concurrent parses
share nothing.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from xml.etree.ElementTree import Element

from trip_gpx.shared.constants import (
    DEFAULT_ELEVATION_NOISE_THRESHOLD_M,
    ROUTE_NAME_PREFIX,
    TRACK_NAME_PREFIX,
)
from trip_gpx.shared.elevation import ElevationProfile
from trip_gpx.shared.geo import distance_m

from .points import decode_point, decode_waypoint
from .schemas import Route, TimedPoint, Track, Waypoint
from .xml_tree import child_text, children

logger = logging.getLogger(__name__)


@dataclass
class GeometryAccumulator:
    """Running state threaded through one extraction."""

    profile: ElevationProfile
    distance_m: float = 0.0
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    dropped_points: int = 0

    def add_point(
        self,
        point: TimedPoint,
        previous: Optional[TimedPoint],
        track_time: bool = True
    ) -> None:
        """
        Fold one decoded point (and its step from ``previous``) into the totals.

        Time bounds come from recorded points only; planned route points
        pass ``track_time=False``.
        """
        self.profile.observe(point.elevation)

        if track_time and point.time is not None:
            if self.start_time is None:
                self.start_time = point.time
            self.end_time = point.time

        if previous is not None:
            self.distance_m += distance_m(previous, point)
            self.profile.add_step(previous.elevation, point.elevation)


@dataclass
class ExtractedGeometry:
    """Output of one extraction: three collections plus the final state."""

    accumulator: GeometryAccumulator
    tracks: List[Track] = field(default_factory=list)
    routes: List[Route] = field(default_factory=list)
    waypoints: List[Waypoint] = field(default_factory=list)


def _walk_points(
    nodes: List[Element],
    acc: GeometryAccumulator,
    track_time: bool = True
) -> List[TimedPoint]:
    """
    Decode a run of consecutive points (one segment or one route).

    Pairs are only formed inside the run; invalid points are skipped
    and the next valid point pairs with the last valid one.
    """
    points: List[TimedPoint] = []
    previous: Optional[TimedPoint] = None

    for node in nodes:
        point = decode_point(node)
        if point is None:
            acc.dropped_points += 1
            continue

        acc.add_point(point, previous, track_time=track_time)
        points.append(point)
        previous = point

    return points


def extract_tracks(gpx: Element, acc: GeometryAccumulator) -> List[Track]:
    """One Track per non-empty <trkseg>; segments are never merged."""
    tracks: List[Track] = []

    for index, trk in enumerate(children(gpx, "trk"), start=1):
        name = child_text(trk, "name") or f"{TRACK_NAME_PREFIX} {index}"

        for segment in children(trk, "trkseg"):
            points = _walk_points(children(segment, "trkpt"), acc)
            if points:
                tracks.append(Track(name=name, points=tuple(points)))

    return tracks


def extract_routes(gpx: Element, acc: GeometryAccumulator) -> List[Route]:
    """One Route per <rte> with at least one valid point."""
    routes: List[Route] = []

    for rte in children(gpx, "rte"):
        points = _walk_points(children(rte, "rtept"), acc, track_time=False)
        if not points:
            continue

        name = child_text(rte, "name") or f"{ROUTE_NAME_PREFIX} {len(routes) + 1}"
        routes.append(Route(name=name, points=tuple(points)))

    return routes


def extract_waypoints(gpx: Element, acc: GeometryAccumulator) -> List[Waypoint]:
    """Waypoints are independent markers, uncorrelated with track/route points."""
    waypoints: List[Waypoint] = []

    for wpt in children(gpx, "wpt"):
        waypoint = decode_waypoint(wpt)
        if waypoint is None:
            acc.dropped_points += 1
            continue
        waypoints.append(waypoint)

    return waypoints


def extract_geometry(
    gpx: Element,
    noise_threshold_m: float = DEFAULT_ELEVATION_NOISE_THRESHOLD_M
) -> ExtractedGeometry:
    """
    Extract tracks, routes and waypoints from a <gpx> root element.

    Args:
        gpx: The document root
        noise_threshold_m: Elevation deltas below this are ignored

    Returns:
        ExtractedGeometry with the accumulated distance/elevation/time state
    """
    acc = GeometryAccumulator(profile=ElevationProfile(noise_threshold_m=noise_threshold_m))

    tracks = extract_tracks(gpx, acc)
    routes = extract_routes(gpx, acc)
    waypoints = extract_waypoints(gpx, acc)

    if acc.dropped_points:
        logger.debug(f"Dropped {acc.dropped_points} invalid points")

    return ExtractedGeometry(
        tracks=tracks,
        routes=routes,
        waypoints=waypoints,
        accumulator=acc,
    )
