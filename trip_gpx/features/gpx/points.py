"""
Point decoding.

Turns one raw <trkpt>/<rtept>/<wpt> element into a validated point.
A bad coordinate rejects the point; a bad elevation or timestamp only
drops that field. Nothing here raises.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Optional, Tuple
from xml.etree.ElementTree import Element

from .schemas import TimedPoint, Waypoint
from .xml_tree import child_text

logger = logging.getLogger(__name__)


def _to_float(value: Optional[str]) -> Optional[float]:
    """Parse a finite float, or None."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_coordinates(node: Element) -> Optional[Tuple[float, float]]:
    """
    Read ``lat``/``lon`` attributes.

    Returns:
        (latitude, longitude), or None if either is missing,
        non-numeric or out of range
    """
    lat = _to_float(node.get("lat"))
    lon = _to_float(node.get("lon"))

    if lat is None or lon is None:
        return None
    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        return None
    return lat, lon


def parse_elevation(text: Optional[str]) -> Optional[float]:
    """Elevation in meters; absent or invalid means no elevation."""
    return _to_float(text)


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp.

    Values are normalized to UTC and truncated to whole seconds;
    timestamps without an offset are taken as UTC.
    """
    if not text:
        return None
    try:
        value = datetime.fromisoformat(text.replace("Z", "+00:00").replace("z", "+00:00"))
    except ValueError:
        return None

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(microsecond=0)


def decode_point(node: Element) -> Optional[TimedPoint]:
    """Decode a track or route point; None if its coordinates are unusable."""
    coords = parse_coordinates(node)
    if coords is None:
        logger.debug(
            f"Dropping point with invalid coordinates: "
            f"lat={node.get('lat')!r} lon={node.get('lon')!r}"
        )
        return None

    lat, lon = coords
    return TimedPoint(
        latitude=lat,
        longitude=lon,
        elevation=parse_elevation(child_text(node, "ele")),
        time=parse_timestamp(child_text(node, "time")),
    )


def decode_waypoint(node: Element) -> Optional[Waypoint]:
    """Decode a <wpt>; None if its coordinates are unusable."""
    coords = parse_coordinates(node)
    if coords is None:
        logger.debug(
            f"Dropping waypoint with invalid coordinates: "
            f"lat={node.get('lat')!r} lon={node.get('lon')!r}"
        )
        return None

    lat, lon = coords
    return Waypoint(
        latitude=lat,
        longitude=lon,
        elevation=parse_elevation(child_text(node, "ele")),
        name=child_text(node, "name"),
    )
