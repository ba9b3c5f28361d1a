"""
Shared fixtures.

GPX documents are authored with gpxpy so fixtures are real, namespaced
GPX 1.1 files. Points are (lat, lon) or (lat, lon, ele) or (lat, lon, ele, time).
"""

import gpxpy.gpx
import pytest


def _point_args(point):
    lat, lon, *rest = point
    ele = rest[0] if len(rest) > 0 else None
    time = rest[1] if len(rest) > 1 else None
    return lat, lon, ele, time


def build_gpx(tracks=(), routes=(), waypoints=()) -> bytes:
    """
    Build a GPX document.

    Args:
        tracks: [(name, [segment_points, ...]), ...]
        routes: [(name, points), ...]
        waypoints: [(lat, lon, ele, name), ...]

    Returns:
        UTF-8 encoded GPX 1.1 document
    """
    gpx = gpxpy.gpx.GPX()

    for name, segments in tracks:
        track = gpxpy.gpx.GPXTrack(name=name)
        for points in segments:
            segment = gpxpy.gpx.GPXTrackSegment()
            for point in points:
                lat, lon, ele, time = _point_args(point)
                segment.points.append(
                    gpxpy.gpx.GPXTrackPoint(lat, lon, elevation=ele, time=time)
                )
            track.segments.append(segment)
        gpx.tracks.append(track)

    for name, points in routes:
        route = gpxpy.gpx.GPXRoute(name=name)
        for point in points:
            lat, lon, ele, _ = _point_args(point)
            route.points.append(gpxpy.gpx.GPXRoutePoint(lat, lon, elevation=ele))
        gpx.routes.append(route)

    for lat, lon, ele, name in waypoints:
        gpx.waypoints.append(
            gpxpy.gpx.GPXWaypoint(lat, lon, elevation=ele, name=name)
        )

    return gpx.to_xml().encode("utf-8")


@pytest.fixture
def gpx_builder():
    """Factory fixture returning build_gpx."""
    return build_gpx


def raw_gpx(body: str) -> bytes:
    """Wrap hand-written XML in a namespaced <gpx> root."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<gpx version="1.1" creator="tests" '
        'xmlns="http://www.topografix.com/GPX/1/1">'
        f"{body}</gpx>"
    ).encode("utf-8")


@pytest.fixture
def raw_gpx_builder():
    """Factory fixture returning raw_gpx."""
    return raw_gpx
