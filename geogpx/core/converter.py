"""
GeoJSON to GPX conversion.

Interpreting GeoJSON as GPX is lossy: the result can not be turned back into
the same GeoJSON. It is still a useful format for many people and is popular
with trail runners, race coordinators, and GPS devices.

Mapping:
- Point            -> <wpt>
- MultiPoint       -> one <wpt> per position
- LineString       -> <trk> with one <trkseg>
- MultiLineString  -> <trk> with one <trkseg> per line
- Polygon / other  -> skipped

GPX requires <metadata>, then every <wpt>, then every <trk>, so waypoints and
tracks are buffered while features are read and appended at the end.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union
from xml.dom.minidom import Document, Element, getDOMImplementation

from geogpx.core.config import options_from_mapping
from geogpx.core.elements import GPX_NS, create_element, create_pt, create_trk, create_trkseg
from geogpx.core.metadata import create_metadata
from geogpx.core.parser import is_geojson_object, parse_geojson
from geogpx.model import (
    ConversionOptions,
    Feature,
    FeatureCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    Point,
    Polygon,
    UnsupportedGeometry,
)

logger = logging.getLogger(__name__)

DEFAULT_CREATOR = "geogpx"
GPX_VERSION = "1.1"


def create_document(creator: Optional[str] = None) -> Tuple[Document, Element]:
    """
    Create a new document and its (not yet attached) <gpx> root.

    The document starts with an `xml` processing instruction; the root is
    appended by `GpxBuilder.finalize` once all children are in place.
    """
    # An empty document; every element is created in GPX_NS explicitly.
    doc = getDOMImplementation().createDocument(None, None, None)
    doc.appendChild(doc.createProcessingInstruction("xml", 'version="1.0" encoding="UTF-8"'))

    gpx = create_element(doc, "gpx")
    # minidom does not serialize namespaces on its own
    gpx.setAttribute("xmlns", GPX_NS)
    gpx.setAttribute("version", GPX_VERSION)
    gpx.setAttribute("creator", creator or DEFAULT_CREATOR)
    return doc, gpx


class GpxBuilder:
    """
    Builds one GPX document.

    A builder is single use: feed it features, then call `finalize()` once.
    """

    def __init__(self, options: Optional[ConversionOptions] = None):
        options = options or ConversionOptions()
        self.doc, self.gpx = create_document(options.creator)
        self.metadata: Optional[Element] = create_metadata(self.doc, options.metadata)
        self.waypoints: List[Element] = []
        self.tracks: List[Element] = []
        self.skipped = 0
        self._finalized = False

    def interpret_feature(self, feature: Feature) -> None:
        """Convert one feature into buffered <wpt>/<trk> elements."""
        geometry = feature.geometry
        properties = feature.properties

        if isinstance(geometry, Point):
            self.waypoints.append(create_pt(self.doc, "wpt", geometry.coordinates, properties))

        elif isinstance(geometry, MultiPoint):
            for position in geometry.coordinates:
                self.waypoints.append(create_pt(self.doc, "wpt", position, properties))

        elif isinstance(geometry, LineString):
            trk = create_trk(self.doc, properties)
            trk.appendChild(create_trkseg(self.doc, geometry.coordinates))
            self.tracks.append(trk)

        elif isinstance(geometry, MultiLineString):
            trk = create_trk(self.doc, properties)
            for line in geometry.coordinates:
                trk.appendChild(create_trkseg(self.doc, line))
            self.tracks.append(trk)

        elif isinstance(geometry, (Polygon, UnsupportedGeometry)):
            # No GPX counterpart. A polygon ring could become a track some day.
            self.skipped += 1
            logger.debug(f"Skipping unsupported geometry: {geometry.type}")

        else:
            raise TypeError(f"Unknown geometry object: {type(geometry).__name__}")

    def interpret(self, geojson: Any) -> None:
        """Interpret a Feature or every feature of a FeatureCollection, in order."""
        if isinstance(geojson, Feature):
            self.interpret_feature(geojson)
        elif isinstance(geojson, FeatureCollection):
            for feature in geojson.features:
                self.interpret_feature(feature)
        else:
            logger.warning(f"Nothing to convert: expected Feature or FeatureCollection, got {type(geojson).__name__}")

    def finalize(self) -> Document:
        """Append metadata, waypoints, then tracks to the root and return the document."""
        if self._finalized:
            raise RuntimeError("GpxBuilder.finalize() called twice")
        self._finalized = True

        if self.metadata is not None:
            self.gpx.appendChild(self.metadata)
        for wpt in self.waypoints:
            self.gpx.appendChild(wpt)
        for trk in self.tracks:
            self.gpx.appendChild(trk)
        self.doc.appendChild(self.gpx)

        logger.debug(
            f"Built GPX: {len(self.waypoints)} waypoint(s), {len(self.tracks)} track(s), "
            f"{self.skipped} skipped feature(s)"
        )
        return self.doc


def convert(
    geojson: Union[Feature, FeatureCollection, Mapping[str, Any]],
    options: Union[ConversionOptions, Mapping[str, Any], None] = None,
) -> Document:
    """
    Convert GeoJSON into a GPX 1.1 document.

    Args:
        geojson: Feature, FeatureCollection, or a decoded GeoJSON mapping.
                 A mapping that is not a Feature, FeatureCollection or
                 geometry (e.g. a TopoJSON `Topology`) gives an empty root.
        options: ConversionOptions, or a mapping with `creator`/`metadata`
                 (same layout as the YAML config file). Mapping values of the
                 wrong shape are ignored rather than rejected.

    Returns:
        xml.dom.minidom.Document; serialize it with `geogpx.io.gpx.to_xml_string`

    Raises:
        GeoJSONError: if a Feature, FeatureCollection or geometry mapping is
                      malformed (typed input never raises)

    See http://www.topografix.com/GPX/1/1/ for the output schema.
    """
    if isinstance(geojson, Mapping):
        if is_geojson_object(geojson):
            geojson = parse_geojson(geojson)
        else:
            logger.warning(f"Nothing to convert: unsupported GeoJSON object type {geojson.get('type')!r}")
            geojson = FeatureCollection([])
    if isinstance(options, Mapping):
        options = options_from_mapping(options)

    builder = GpxBuilder(options)
    builder.interpret(geojson)
    return builder.finalize()
