"""
Metadata synthesis.

Turns the final extraction state into the GPXMetadata summary.
"""

from typing import List

from trip_gpx.shared.formatters import round_half_up

from .extractor import GeometryAccumulator
from .schemas import GPXMetadata, Waypoint


def build_metadata(
    filename: str,
    acc: GeometryAccumulator,
    waypoints: List[Waypoint]
) -> GPXMetadata:
    """
    Build the summary record for one parsed file.

    The waypoint count comes from <wpt> elements only, never from
    track or route point counts. Duration is reported only when the
    end time is strictly after the start time.

    Args:
        filename: Label for the uploaded file
        acc: Final accumulator state of the extraction
        waypoints: Decoded waypoints

    Returns:
        GPXMetadata
    """
    profile = acc.profile

    duration = None
    if acc.start_time is not None and acc.end_time is not None:
        seconds = int((acc.end_time - acc.start_time).total_seconds())
        if seconds > 0:
            duration = seconds

    return GPXMetadata(
        filename=filename,
        distance_meters=round(acc.distance_m, 2),
        waypoint_count=len(waypoints),
        elevation_gain_m=round_half_up(profile.gain) if profile.gain > 0 else None,
        elevation_loss_m=round_half_up(profile.loss) if profile.loss > 0 else None,
        max_elevation_m=round_half_up(profile.max_elevation) if profile.max_elevation is not None else None,
        min_elevation_m=round_half_up(profile.min_elevation) if profile.min_elevation is not None else None,
        duration_seconds=duration,
        start_time=acc.start_time,
        end_time=acc.end_time,
    )
