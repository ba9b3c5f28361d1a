"""
GPX file handling module.

Usage:
    from trip_gpx.features.gpx import GPXParserService, parse_gpx_content

Components:
- GPXParserService: Parse GPX content, extract geometry, metadata and key points
- sample_key_points: Distance-interval downsampling of a point stream
- Upload helpers: type/size checks applied by callers before parsing
- Schemas: frozen Pydantic models for the parse result
"""

from .key_points import sample_key_points
from .parser import GPXParserService, InvalidGPXError, parse_gpx_content
from .schemas import (
    GeoPoint,
    GPXMetadata,
    KeyPoint,
    KeyPointRole,
    ParseResult,
    Route,
    TimedPoint,
    Track,
    Waypoint,
)
from .uploads import (
    UploadRejectedError,
    is_valid_gpx_file,
    is_valid_gpx_file_size,
    read_gpx_upload,
)

__all__ = [
    # Services
    "GPXParserService",
    "parse_gpx_content",
    "sample_key_points",
    # Errors
    "InvalidGPXError",
    "UploadRejectedError",
    # Uploads
    "is_valid_gpx_file",
    "is_valid_gpx_file_size",
    "read_gpx_upload",
    # Schemas
    "GeoPoint",
    "TimedPoint",
    "Track",
    "Route",
    "Waypoint",
    "GPXMetadata",
    "KeyPoint",
    "KeyPointRole",
    "ParseResult",
]
