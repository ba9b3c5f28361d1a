"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from dataclasses import dataclass
from typing import Optional

from trip_gpx.shared.constants import DEFAULT_ELEVATION_NOISE_THRESHOLD_M


@dataclass
class ElevationProfile:
    """
    Running elevation gain/loss/min/max over consecutive readings.

    Deltas smaller than ``noise_threshold_m`` are dropped entirely
    (not smoothed, not carried over). Min/max track every reading
    regardless of the threshold.
    """

    noise_threshold_m: float = DEFAULT_ELEVATION_NOISE_THRESHOLD_M
    gain: float = 0.0
    loss: float = 0.0
    max_elevation: Optional[float] = None
    min_elevation: Optional[float] = None

    def observe(self, elevation: Optional[float]) -> None:
        """Update min/max bounds from a single reading."""
        if elevation is None:
            return
        if self.max_elevation is None or elevation > self.max_elevation:
            self.max_elevation = elevation
        if self.min_elevation is None or elevation < self.min_elevation:
            self.min_elevation = elevation

    def add_step(
        self,
        previous: Optional[float],
        current: Optional[float]
    ) -> None:
        """
        Accumulate the delta between two consecutive readings.

        A missing elevation on either end skips the pair without
        touching the totals.
        """
        if previous is None or current is None:
            return

        diff = current - previous
        if abs(diff) < self.noise_threshold_m:
            return

        if diff > 0:
            self.gain += diff
        else:
            self.loss += abs(diff)

    @property
    def has_readings(self) -> bool:
        return self.max_elevation is not None
