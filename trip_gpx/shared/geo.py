"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import Iterable, Protocol

# Earth radius in kilometers
EARTH_RADIUS_KM = 6371.0


class Coordinate(Protocol):
    """Anything exposing latitude/longitude in degrees."""

    latitude: float
    longitude: float


def haversine(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_m(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two points, in meters."""
    return haversine(a.latitude, a.longitude, b.latitude, b.longitude) * 1000


def path_distance_m(points: Iterable[Coordinate]) -> float:
    """
    Calculate total distance along a sequence of points.

    Args:
        points: Points in traversal order

    Returns:
        Sum of consecutive pairwise distances in meters
    """
    total = 0.0
    previous = None

    for point in points:
        if previous is not None:
            total += distance_m(previous, point)
        previous = point

    return total
