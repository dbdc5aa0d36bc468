"""
In-memory data model for geogpx.

Two halves:
- conversion options (creator + GPX metadata), mirroring the GPX 1.1
  metadataType/personType/copyrightType/linkType/boundsType
- GeoJSON input (features and a tagged union of geometry kinds)

The input model is intentionally small: it carries only what the GPX writer
reads. Raw GeoJSON mappings are turned into these objects by
`geogpx.core.parser`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Mapping, Optional, Sequence, Union


Position = Sequence[Any]
"""
Position: [lon, lat, ele?, time?]

Elevation and time are optional trailing components. `None` in either slot
means the value is undefined and no tag is written for it.
"""


# ---------------------------------------------------------------------------
# Conversion options
# ---------------------------------------------------------------------------


@dataclass
class Link:
    href: str
    text: Optional[str] = None
    type: Optional[str] = None


@dataclass
class Person:
    name: Optional[str] = None
    email: Optional[str] = None
    link: Optional[Link] = None


@dataclass
class Copyright:
    author: Optional[str] = None  # written as an attribute, not a child tag
    year: Optional[str] = None
    license: Optional[str] = None


@dataclass
class Bounds:
    minlat: str
    minlon: str
    maxlat: str
    maxlon: str


@dataclass
class MetaData:
    """
    Document-level metadata written to <metadata>.

    `bounds` is accepted for completeness but is not written.
    """

    name: Optional[str] = None
    desc: Optional[str] = None
    author: Optional[Person] = None
    copyright: Optional[Copyright] = None
    link: Optional[Link] = None
    time: Optional[str] = None
    keywords: Optional[str] = None
    bounds: Optional[Bounds] = None


@dataclass
class ConversionOptions:
    creator: Optional[str] = None
    metadata: Optional[MetaData] = None


# ---------------------------------------------------------------------------
# GeoJSON input
# ---------------------------------------------------------------------------


@dataclass
class Point:
    type: ClassVar[str] = "Point"
    coordinates: Position


@dataclass
class MultiPoint:
    type: ClassVar[str] = "MultiPoint"
    coordinates: List[Position]


@dataclass
class LineString:
    type: ClassVar[str] = "LineString"
    coordinates: List[Position]


@dataclass
class MultiLineString:
    type: ClassVar[str] = "MultiLineString"
    coordinates: List[List[Position]]


@dataclass
class Polygon:
    type: ClassVar[str] = "Polygon"
    coordinates: List[List[Position]]


@dataclass
class UnsupportedGeometry:
    """Any GeoJSON geometry kind GPX has no mapping for (MultiPolygon, GeometryCollection, ...)."""

    type_name: str
    coordinates: Any = None

    @property
    def type(self) -> str:
        return self.type_name


Geometry = Union[Point, MultiPoint, LineString, MultiLineString, Polygon, UnsupportedGeometry]

SUPPORTED_GEOMETRIES = (Point, MultiPoint, LineString, MultiLineString)


@dataclass
class Feature:
    geometry: Geometry
    properties: Optional[Mapping[str, Any]] = None
    id: Optional[Any] = None

    @property
    def geometry_type(self) -> str:
        return self.geometry.type

    def is_supported(self) -> bool:
        """True if this feature produces at least one GPX element kind."""
        return isinstance(self.geometry, SUPPORTED_GEOMETRIES)


@dataclass
class FeatureCollection:
    features: List[Feature] = field(default_factory=list)

    def unsupported(self) -> List[Feature]:
        return [f for f in self.features if not f.is_supported()]


GeoJSON = Union[Feature, FeatureCollection]
