"""
Key point sampling.

Downsamples a full-resolution point stream to one point every
``interval_km`` of travelled distance, so the summary grows with trip
length rather than with the device's recording frequency.
"""

from typing import List, Sequence

from trip_gpx.shared.constants import (
    DEFAULT_KEY_POINT_INTERVAL_KM,
    KEY_POINT_END_LABEL,
    KEY_POINT_INTERMEDIATE_LABEL,
    KEY_POINT_SINGLE_LABEL,
    KEY_POINT_START_LABEL,
)
from trip_gpx.shared.formatters import round_half_up
from trip_gpx.shared.geo import distance_m

from .schemas import GeoPoint, KeyPoint, KeyPointRole


def _as_geo_point(point: GeoPoint) -> GeoPoint:
    return GeoPoint(
        latitude=point.latitude,
        longitude=point.longitude,
        elevation=point.elevation,
    )


def sample_key_points(
    points: Sequence[GeoPoint],
    interval_km: float = DEFAULT_KEY_POINT_INTERVAL_KM
) -> List[KeyPoint]:
    """
    Sample start, every ``interval_km``, and end.

    An intermediate point is emitted as soon as the distance since the
    previous key point reaches the interval (exactly-at-interval counts).
    The last point is always emitted as the end, however close it is to
    the previous key point.

    Args:
        points: Points in traversal order
        interval_km: Sampling interval in kilometers

    Returns:
        List of KeyPoint, empty for empty input

    Raises:
        ValueError: If interval_km is not positive
    """
    if interval_km <= 0:
        raise ValueError(f"interval_km must be positive, got {interval_km}")

    if not points:
        return []

    first = _as_geo_point(points[0])

    if len(points) == 1:
        return [KeyPoint(
            point=first,
            distance_from_start_km=0.0,
            role=KeyPointRole.START,
            label=KEY_POINT_SINGLE_LABEL,
        )]

    key_points = [KeyPoint(
        point=first,
        distance_from_start_km=0.0,
        role=KeyPointRole.START,
        label=KEY_POINT_START_LABEL,
    )]

    interval_m = interval_km * 1000
    cumulative_m = 0.0
    last_key_m = 0.0

    for i in range(1, len(points)):
        cumulative_m += distance_m(points[i - 1], points[i])

        if cumulative_m - last_key_m >= interval_m:
            km = cumulative_m / 1000
            key_points.append(KeyPoint(
                point=_as_geo_point(points[i]),
                distance_from_start_km=km,
                role=KeyPointRole.INTERMEDIATE,
                label=KEY_POINT_INTERMEDIATE_LABEL.format(km=round_half_up(km)),
            ))
            last_key_m = cumulative_m

    total_km = cumulative_m / 1000
    key_points.append(KeyPoint(
        point=_as_geo_point(points[-1]),
        distance_from_start_km=total_km,
        role=KeyPointRole.END,
        label=KEY_POINT_END_LABEL.format(km=round_half_up(total_km)),
    ))

    return key_points
