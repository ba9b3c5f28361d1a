"""
Constants shared across GPX processing.

Defaults here are overridable through app settings.
"""

# GPS elevation noise filter (m): smaller deltas are dropped
DEFAULT_ELEVATION_NOISE_THRESHOLD_M = 3.0

# Key point sampling interval (km)
DEFAULT_KEY_POINT_INTERVAL_KM = 30.0

# Upload ceiling enforced by callers (20 MB)
MAX_GPX_FILE_SIZE_BYTES = 20 * 1024 * 1024

VALID_GPX_MIME_TYPES: frozenset[str] = frozenset({
    "application/gpx+xml",
    "application/xml",
    "text/xml",
})
VALID_GPX_EXTENSIONS: tuple[str, ...] = (".gpx",)

DEFAULT_GPX_FILENAME = "unknown.gpx"

# Fallback names for unnamed tracks/routes ("Traccia 1", "Route 1")
TRACK_NAME_PREFIX = "Traccia"
ROUTE_NAME_PREFIX = "Route"

# Key point labels shown in trip descriptions
KEY_POINT_START_LABEL = "Partenza"
KEY_POINT_SINGLE_LABEL = "Punto unico"
KEY_POINT_END_LABEL = "Arrivo ({km}km)"
KEY_POINT_INTERMEDIATE_LABEL = "{km}km"
