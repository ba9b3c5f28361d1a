"""
Tests for caller-side upload checks.
"""

import pytest

from trip_gpx.features.gpx import (
    UploadRejectedError,
    is_valid_gpx_file,
    is_valid_gpx_file_size,
    read_gpx_upload,
)


class TestIsValidGpxFile:

    @pytest.mark.parametrize("content_type", [
        "application/gpx+xml",
        "application/xml",
        "text/xml",
        "text/xml; charset=utf-8",
    ])
    def test_mime_types(self, content_type):
        assert is_valid_gpx_file("upload.bin", content_type)

    @pytest.mark.parametrize("filename", ["ride.gpx", "RIDE.GPX", "a.b.Gpx"])
    def test_extension_fallback(self, filename):
        assert is_valid_gpx_file(filename, "application/octet-stream")

    def test_rejected(self):
        assert not is_valid_gpx_file("ride.fit", "application/octet-stream")
        assert not is_valid_gpx_file("ride.gpx.zip")


class TestIsValidGpxFileSize:

    def test_default_ceiling_is_20_mb(self):
        assert is_valid_gpx_file_size(20 * 1024 * 1024)
        assert not is_valid_gpx_file_size(20 * 1024 * 1024 + 1)

    def test_custom_ceiling(self):
        assert is_valid_gpx_file_size(10, max_bytes=10)
        assert not is_valid_gpx_file_size(11, max_bytes=10)


class TestReadGpxUpload:

    def test_reads_content(self, tmp_path, raw_gpx_builder):
        path = tmp_path / "trip.gpx"
        path.write_bytes(raw_gpx_builder(""))
        assert read_gpx_upload(path) == raw_gpx_builder("")

    def test_too_large(self, tmp_path):
        path = tmp_path / "big.gpx"
        path.write_bytes(b"x" * 100)
        with pytest.raises(UploadRejectedError, match="too large"):
            read_gpx_upload(path, max_bytes=99)

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "trip.kml"
        path.write_bytes(b"<kml/>")
        with pytest.raises(UploadRejectedError):
            read_gpx_upload(path)
