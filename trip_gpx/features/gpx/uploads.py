"""
Upload checks performed by callers before handing content to the parser.

The parser itself never touches the filesystem and has no size limit.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from trip_gpx.config import settings
from trip_gpx.shared.constants import VALID_GPX_EXTENSIONS, VALID_GPX_MIME_TYPES

logger = logging.getLogger(__name__)


class UploadRejectedError(ValueError):
    """Upload refused before parsing (wrong type or too large)."""


def is_valid_gpx_file(filename: str, content_type: Optional[str] = None) -> bool:
    """Accept known GPX/XML MIME types, falling back to the file extension."""
    if content_type and content_type.split(";")[0].strip().lower() in VALID_GPX_MIME_TYPES:
        return True
    return filename.lower().endswith(VALID_GPX_EXTENSIONS)


def is_valid_gpx_file_size(size: int, max_bytes: Optional[int] = None) -> bool:
    """Check the upload against the size ceiling (20 MB by default)."""
    if max_bytes is None:
        max_bytes = settings.max_upload_bytes
    return size <= max_bytes


def read_gpx_upload(path: Union[str, Path], max_bytes: Optional[int] = None) -> bytes:
    """
    Read a whole GPX file after type and size checks.

    Args:
        path: File to read
        max_bytes: Size ceiling override

    Returns:
        File content

    Raises:
        UploadRejectedError: If the file is not a GPX file or is too large
    """
    path = Path(path)

    if not is_valid_gpx_file(path.name):
        raise UploadRejectedError(f"{path.name}: not a .gpx file")

    size = path.stat().st_size
    if not is_valid_gpx_file_size(size, max_bytes):
        limit = max_bytes if max_bytes is not None else settings.max_upload_bytes
        logger.warning(f"Rejected {path.name}: {size} bytes exceeds {limit}")
        raise UploadRejectedError(f"{path.name}: file too large ({size} bytes, max {limit})")

    return path.read_bytes()
