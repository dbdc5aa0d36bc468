"""geogpx - GeoJSON to GPX 1.1 converter."""

__version__ = "0.1.0"
__description__ = "Convert GeoJSON features to GPX 1.1 waypoints and tracks"

from geogpx.core.converter import DEFAULT_CREATOR, convert
from geogpx.cli import app, main

__all__ = ["convert", "DEFAULT_CREATOR", "app", "main", "__version__"]
