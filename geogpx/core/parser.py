"""
GeoJSON parser.

This module turns raw GeoJSON mappings (as produced by `json.load`) into the
typed model in `geogpx.model`. It is the only place where malformed input is
rejected: the converter itself assumes a well-formed object graph.
"""

from __future__ import annotations

import logging
from numbers import Real
from typing import Any, Dict, List, Mapping, Sequence, Union

from geogpx.model import (
    Feature,
    FeatureCollection,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    Point,
    Polygon,
    UnsupportedGeometry,
)

logger = logging.getLogger(__name__)


class GeoJSONError(ValueError):
    """Raised when a GeoJSON object is missing structure the converter needs."""


def _check_position(position: Any, where: str) -> Sequence[Any]:
    if isinstance(position, (str, bytes)) or not isinstance(position, Sequence):
        raise GeoJSONError(f"{where}: position must be an array, got {type(position).__name__}")
    if len(position) < 2:
        raise GeoJSONError(f"{where}: position must contain at least lon,lat (got {list(position)!r})")
    for value in position[:2]:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise GeoJSONError(f"{where}: lon/lat must be numbers (got {list(position)!r})")
    return position


def _check_positions(positions: Any, where: str) -> List[Sequence[Any]]:
    if isinstance(positions, (str, bytes)) or not isinstance(positions, Sequence):
        raise GeoJSONError(f"{where}: expected an array of positions")
    return [_check_position(p, f"{where}[{i}]") for i, p in enumerate(positions)]


def _check_lines(lines: Any, where: str) -> List[List[Sequence[Any]]]:
    if isinstance(lines, (str, bytes)) or not isinstance(lines, Sequence):
        raise GeoJSONError(f"{where}: expected an array of position arrays")
    return [_check_positions(line, f"{where}[{i}]") for i, line in enumerate(lines)]


def parse_geometry(data: Any) -> Geometry:
    """
    Parse a GeoJSON geometry object.

    `null` geometries (valid GeoJSON for unlocated features) and geometry
    kinds GPX cannot express become `UnsupportedGeometry`. Polygon rings are
    kept as-is; they are never written.

    Raises:
        GeoJSONError: if `type` or `coordinates` is missing or malformed
    """
    if data is None:
        return UnsupportedGeometry("null")
    if not isinstance(data, Mapping):
        raise GeoJSONError(f"Geometry must be an object, got {type(data).__name__}")

    geometry_type = data.get("type")
    if not isinstance(geometry_type, str) or not geometry_type:
        raise GeoJSONError("Geometry is missing 'type'")

    if geometry_type == "GeometryCollection":
        return UnsupportedGeometry(geometry_type, data.get("geometries"))

    if "coordinates" not in data:
        raise GeoJSONError(f"{geometry_type} geometry is missing 'coordinates'")
    coordinates = data["coordinates"]

    if geometry_type == "Point":
        return Point(_check_position(coordinates, "Point.coordinates"))
    if geometry_type == "MultiPoint":
        return MultiPoint(_check_positions(coordinates, "MultiPoint.coordinates"))
    if geometry_type == "LineString":
        return LineString(_check_positions(coordinates, "LineString.coordinates"))
    if geometry_type == "MultiLineString":
        return MultiLineString(_check_lines(coordinates, "MultiLineString.coordinates"))
    if geometry_type == "Polygon":
        return Polygon(coordinates)

    logger.debug(f"Unrecognized geometry type {geometry_type!r}; it will not be written")
    return UnsupportedGeometry(geometry_type, coordinates)


def parse_feature(data: Any) -> Feature:
    """
    Parse a GeoJSON Feature object.

    Raises:
        GeoJSONError: if the feature has no `geometry` member
    """
    if not isinstance(data, Mapping):
        raise GeoJSONError(f"Feature must be an object, got {type(data).__name__}")
    if "geometry" not in data:
        raise GeoJSONError(f"Feature is missing 'geometry' (id={data.get('id')!r})")

    properties = data.get("properties")
    return Feature(
        geometry=parse_geometry(data["geometry"]),
        properties=properties if isinstance(properties, Mapping) else None,
        id=data.get("id"),
    )


def is_geojson_object(data: Any) -> bool:
    """True for a mapping `parse_geojson` knows how to read: a Feature, FeatureCollection or geometry."""
    if not isinstance(data, Mapping):
        return False
    kind = data.get("type")
    if kind in ("FeatureCollection", "Feature", "GeometryCollection"):
        return True
    return isinstance(kind, str) and "coordinates" in data


def parse_geojson(data: Union[Mapping[str, Any], Dict[str, Any]]) -> Union[Feature, FeatureCollection]:
    """
    Parse a top-level GeoJSON object.

    Accepts a FeatureCollection, a Feature, or a bare geometry (wrapped in a
    Feature with no properties).

    Args:
        data: Decoded GeoJSON

    Returns:
        Feature or FeatureCollection

    Raises:
        GeoJSONError: if the object is not GeoJSON or a member is malformed
    """
    if not isinstance(data, Mapping):
        raise GeoJSONError(f"GeoJSON must be an object, got {type(data).__name__}")

    kind = data.get("type")
    if kind == "FeatureCollection":
        features = data.get("features")
        if not isinstance(features, list):
            raise GeoJSONError("FeatureCollection is missing 'features' array")
        parsed: List[Feature] = []
        for i, feature in enumerate(features):
            try:
                parsed.append(parse_feature(feature))
            except GeoJSONError as e:
                raise GeoJSONError(f"features[{i}]: {e}") from e
        return FeatureCollection(parsed)
    if kind == "Feature":
        return parse_feature(data)
    if is_geojson_object(data):
        return Feature(geometry=parse_geometry(data))

    raise GeoJSONError(f"Unsupported GeoJSON object type: {kind!r}")
