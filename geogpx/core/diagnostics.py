"""
Diagnostics helpers.

Summaries of what a conversion produced and what it dropped, used by the CLI
to report results and by tests to inspect documents.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Iterable, List, Tuple, Union
from xml.dom.minidom import Document

from geogpx.model import (
    Feature,
    FeatureCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    Point,
)


def _features(geojson: Union[Feature, FeatureCollection]) -> List[Feature]:
    if isinstance(geojson, FeatureCollection):
        return list(geojson.features)
    if isinstance(geojson, Feature):
        return [geojson]
    return []


def document_inventory(doc: Document) -> Dict[str, Any]:
    """Count the GPX elements in a converted document."""
    root = doc.documentElement
    if root is None:
        return {
            "has_metadata": False,
            "waypoint_count": 0,
            "track_count": 0,
            "segment_count": 0,
            "trackpoint_count": 0,
        }
    return {
        "has_metadata": bool(root.getElementsByTagName("metadata")),
        "waypoint_count": len(root.getElementsByTagName("wpt")),
        "track_count": len(root.getElementsByTagName("trk")),
        "segment_count": len(root.getElementsByTagName("trkseg")),
        "trackpoint_count": len(root.getElementsByTagName("trkpt")),
    }


def skipped_inventory(geojson: Union[Feature, FeatureCollection]) -> Dict[str, int]:
    """Geometry type -> number of features that produce no GPX output."""
    collection = FeatureCollection(_features(geojson))
    counts = Counter(feature.geometry_type for feature in collection.unsupported())
    return dict(counts)


def _positions(feature: Feature) -> Iterable[Tuple[float, float]]:
    geometry = feature.geometry
    if isinstance(geometry, Point):
        yield geometry.coordinates[0], geometry.coordinates[1]
    elif isinstance(geometry, (MultiPoint, LineString)):
        for p in geometry.coordinates:
            yield p[0], p[1]
    elif isinstance(geometry, MultiLineString):
        for line in geometry.coordinates:
            for p in line:
                yield p[0], p[1]


def check_data_quality(geojson: Union[Feature, FeatureCollection]) -> Dict[str, Any]:
    """
    Check input data quality and return warnings.

    Returns a dict with:
    - out_of_range: list of (feature_index, lon, lat) outside -180..180 / -90..90
    - empty_tracks: list of feature indexes whose line(s) have no positions
    """
    warnings: Dict[str, Any] = {"out_of_range": [], "empty_tracks": []}

    for index, feature in enumerate(_features(geojson)):
        for lon, lat in _positions(feature):
            if not (-90 <= float(lat) <= 90) or not (-180 <= float(lon) <= 180):
                warnings["out_of_range"].append((index, lon, lat))

        geometry = feature.geometry
        if isinstance(geometry, LineString) and not geometry.coordinates:
            warnings["empty_tracks"].append(index)
        elif isinstance(geometry, MultiLineString) and not any(geometry.coordinates):
            warnings["empty_tracks"].append(index)

    return warnings
