"""Convert command for geogpx CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from geogpx.core.config import ConfigError, load_config
from geogpx.core.converter import convert as convert_geojson
from geogpx.core.diagnostics import check_data_quality, document_inventory, skipped_inventory
from geogpx.io.geojson import read_geojson
from geogpx.io.gpx import write_gpx
from geogpx.model import MetaData
from geogpx.utils.utils import default_output_path, ensure_output_dir, format_file_size

console = Console()


def print_summary(inventory: dict, skipped: dict, output_path: Path, size: int) -> None:
    """Print a table of what was written."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("GPX element")
    table.add_column("Count", justify="right")
    table.add_row("Waypoints (wpt)", str(inventory["waypoint_count"]))
    table.add_row("Tracks (trk)", str(inventory["track_count"]))
    table.add_row("Segments (trkseg)", str(inventory["segment_count"]))
    table.add_row("Track points (trkpt)", str(inventory["trackpoint_count"]))
    console.print(table)

    if skipped:
        parts = ", ".join(f"{count} {kind}" for kind, count in sorted(skipped.items()))
        console.print(f"[yellow]⚠️  Skipped features with no GPX equivalent:[/] {parts}")

    console.print(f"[bold green]✔[/] Wrote [underline]{output_path}[/] [dim]({format_file_size(size)})[/]")


def convert(
    input_file: Path = typer.Argument(..., help="GeoJSON file to convert"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output .gpx file or directory (default: next to the input)"
    ),
    creator: Optional[str] = typer.Option(None, "--creator", help="Value of the gpx creator attribute"),
    name: Optional[str] = typer.Option(None, "--name", help="Metadata name"),
    desc: Optional[str] = typer.Option(None, "--desc", help="Metadata description"),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML config with creator/metadata (default: ./geogpx_config.yaml)"
    ),
    compact: bool = typer.Option(False, "--compact", help="Write without indentation"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Convert a GeoJSON Feature or FeatureCollection to GPX."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = load_config(config_file)
    except ConfigError as e:
        console.print(f"[bold red]❌ Invalid configuration:[/] {e}")
        raise typer.Exit(1)

    # Command line values win over the config file
    if creator:
        options.creator = creator
    if name or desc:
        if options.metadata is None:
            options.metadata = MetaData()
        if name:
            options.metadata.name = name
        if desc:
            options.metadata.desc = desc

    try:
        geojson = read_geojson(input_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]❌ Error:[/] {e}")
        raise typer.Exit(1)

    quality = check_data_quality(geojson)
    for index, lon, lat in quality["out_of_range"]:
        console.print(f"[yellow]⚠️  Feature {index}: coordinate out of range (lon={lon}, lat={lat})[/]")
    for index in quality["empty_tracks"]:
        console.print(f"[yellow]⚠️  Feature {index}: line has no positions[/]")

    doc = convert_geojson(geojson, options)

    output_path = default_output_path(input_file, output)
    ensure_output_dir(output_path.parent)
    size = write_gpx(doc, output_path, pretty=not compact)

    print_summary(document_inventory(doc), skipped_inventory(geojson), output_path, size)
