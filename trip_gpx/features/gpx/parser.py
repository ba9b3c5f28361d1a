"""
GPX Parser Service

Parses GPX files and extracts tracks, routes, waypoints and trip metadata.
"""

import codecs
import logging
from typing import List, Optional, Union
from xml.etree.ElementTree import Element, ParseError

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from trip_gpx.config import settings
from trip_gpx.shared.constants import DEFAULT_GPX_FILENAME

from .extractor import extract_geometry
from .key_points import sample_key_points
from .metadata import build_metadata
from .schemas import KeyPoint, ParseResult
from .xml_tree import local_name

logger = logging.getLogger(__name__)


class InvalidGPXError(ValueError):
    """The document has no <gpx> root (or is not XML at all)."""

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        message = "not a valid GPX file"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class GPXParserService:
    """
    Service for parsing GPX files.

    Holds only configuration; every parse builds its own state, so one
    instance can serve concurrent callers.
    """

    def __init__(
        self,
        noise_threshold_m: Optional[float] = None,
        key_point_interval_km: Optional[float] = None
    ):
        self.noise_threshold_m = (
            noise_threshold_m if noise_threshold_m is not None
            else settings.elevation_noise_threshold_m
        )
        self.key_point_interval_km = (
            key_point_interval_km if key_point_interval_km is not None
            else settings.key_point_interval_km
        )

    def parse(
        self,
        content: Union[bytes, str],
        filename: str = DEFAULT_GPX_FILENAME
    ) -> ParseResult:
        """
        Parse GPX content and extract route information.

        Args:
            content: Complete GPX file content
            filename: Label stored in the metadata

        Returns:
            ParseResult with tracks, routes, waypoints and metadata

        Raises:
            InvalidGPXError: If the document has no <gpx> root
        """
        root = self._load_root(content)

        geometry = extract_geometry(root, noise_threshold_m=self.noise_threshold_m)
        acc = geometry.accumulator
        metadata = build_metadata(filename, acc, geometry.waypoints)

        logger.info(
            f"Parsed {filename}: {len(geometry.tracks)} tracks, "
            f"{len(geometry.routes)} routes, {len(geometry.waypoints)} waypoints, "
            f"{metadata.distance_meters} m, {acc.dropped_points} dropped points"
        )

        return ParseResult(
            tracks=tuple(geometry.tracks),
            routes=tuple(geometry.routes),
            waypoints=tuple(geometry.waypoints),
            metadata=metadata,
            dropped_points=acc.dropped_points,
        )

    def extract_key_points(
        self,
        result: ParseResult,
        interval_km: Optional[float] = None
    ) -> List[KeyPoint]:
        """
        Sample key points over all track points followed by all route points.

        Args:
            result: A parse result
            interval_km: Override for the configured sampling interval

        Returns:
            List of KeyPoint (start, every interval, end)
        """
        if interval_km is None:
            interval_km = self.key_point_interval_km
        return sample_key_points(result.all_points(), interval_km=interval_km)

    @staticmethod
    def _load_root(content: Union[bytes, str]) -> Element:
        """Decode the XML document and return its <gpx> root element."""
        # BOM and whitespace before the XML declaration are not fatal
        if isinstance(content, str):
            content = content.lstrip("\ufeff").lstrip()
        else:
            content = content.lstrip()
            if content.startswith(codecs.BOM_UTF8):
                content = content[len(codecs.BOM_UTF8):].lstrip()

        try:
            root = ET.fromstring(content)
        except (ParseError, DefusedXmlException) as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise InvalidGPXError(str(e)) from e

        if local_name(root.tag) != "gpx":
            logger.error(f"Failed to parse GPX: unexpected root <{local_name(root.tag)}>")
            raise InvalidGPXError(f"root element is <{local_name(root.tag)}>")

        return root


def parse_gpx_content(
    content: Union[bytes, str],
    filename: str = DEFAULT_GPX_FILENAME
) -> ParseResult:
    """Parse with the configured defaults."""
    return GPXParserService().parse(content, filename)
