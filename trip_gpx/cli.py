"""
CLI interface for GPX analysis.

Usage:
    trip-gpx summary route.gpx
    trip-gpx summary route.gpx --json
    trip-gpx key-points route.gpx --interval 20
    trip-gpx map-data route.gpx
"""

import json
import logging
import sys

import click

from trip_gpx.config import settings
from trip_gpx.features.gpx import (
    GPXParserService,
    InvalidGPXError,
    UploadRejectedError,
    read_gpx_upload,
)


def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def _load(path: str, service: GPXParserService):
    """Read and parse one file, turning domain errors into CLI errors."""
    try:
        content = read_gpx_upload(path)
        return service.parse(content, filename=click.format_filename(path, shorten=True))
    except (InvalidGPXError, UploadRejectedError) as e:
        raise click.ClickException(str(e))


@click.group()
def cli():
    """GPX trip analysis tools."""
    _setup_logging()


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the metadata record as JSON")
def summary(path, as_json):
    """Print trip metadata for a GPX file."""
    result = _load(path, GPXParserService())
    meta = result.metadata

    if as_json:
        click.echo(json.dumps(meta.to_record(), indent=2))
        return

    if result.is_empty:
        click.echo("No tracks, routes or waypoints found.")

    click.echo(f"File: {meta.filename}")
    click.echo(f"Tracks: {len(result.tracks)}  Routes: {len(result.routes)}  "
               f"Waypoints: {meta.waypoint_count}")
    click.echo(f"Distance: {meta.distance_km} km")
    if meta.elevation_gain_m is not None or meta.elevation_loss_m is not None:
        click.echo(f"Elevation: +{meta.elevation_gain_m or 0} m / -{meta.elevation_loss_m or 0} m")
    if meta.min_elevation_m is not None:
        click.echo(f"Altitude: {meta.min_elevation_m}-{meta.max_elevation_m} m")
    if meta.duration_seconds is not None:
        hours, rest = divmod(meta.duration_seconds, 3600)
        click.echo(f"Duration: {hours}h{rest // 60:02d}m")
    if result.dropped_points:
        click.echo(f"Skipped {result.dropped_points} invalid points")


@cli.command("key-points")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--interval", default=None, type=float, help="Sampling interval in km")
def key_points(path, interval):
    """List key points (start, every interval, end)."""
    if interval is not None and interval <= 0:
        raise click.BadParameter("must be positive", param_hint="--interval")

    service = GPXParserService()
    result = _load(path, service)

    for kp in service.extract_key_points(result, interval_km=interval):
        click.echo(f"{kp.role.value:<12} {kp.distance_from_start_km:>8.2f} km  "
                   f"{kp.point.latitude:.5f},{kp.point.longitude:.5f}  {kp.label}")


@cli.command("map-data")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def map_data(path):
    """Print tracks/routes/waypoints as JSON for the map viewer."""
    result = _load(path, GPXParserService())
    click.echo(json.dumps(result.to_map_data()))


if __name__ == "__main__":
    cli()
