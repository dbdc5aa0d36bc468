#!/usr/bin/env python3
"""
geogpx - GeoJSON to GPX converter
Main CLI entry point
"""

from __future__ import annotations

import typer

# Import command modules
from geogpx.commands import config_cmd, convert_cmd

app = typer.Typer(
    name="geogpx",
    help="Convert GeoJSON to GPX 1.1",
    no_args_is_help=True,
    add_completion=True,
)

# Register the convert command directly (not as a sub-app)
app.command(name="convert", help="Convert a GeoJSON file to GPX")(convert_cmd.convert)

# Register command groups
app.add_typer(config_cmd.app, name="config", help="Manage configuration settings")


@app.callback()
def callback() -> None:
    """
    geogpx - GeoJSON to GPX converter

    Points and MultiPoints become waypoints, LineStrings and
    MultiLineStrings become tracks. Polygons are skipped.

    Commands:
      convert                 - Convert a GeoJSON file to GPX
      config                  - Manage creator/metadata settings
    """
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
