"""
GPX element factories.

Small constructors for the GPX 1.1 element types geogpx writes. Every
factory takes the owning `xml.dom.minidom.Document` and either returns a new
element or appends to a given parent; none of them touch other subtrees.

See http://www.topografix.com/GPX/1/1/ for the element types.
"""

from __future__ import annotations

from dataclasses import is_dataclass
from typing import Any, Iterable, Literal, Mapping, Optional, Sequence
from xml.dom.minidom import Document, Element

from geogpx.model import Position
from geogpx.utils.utils import format_decimal

GPX_NS = "http://www.topografix.com/GPX/1/1"

# Keys copied from a GeoJSON properties bag, in output order.
PT_SUPPORTED_PROPERTIES = ("name", "desc", "src", "type")
TRK_SUPPORTED_PROPERTIES = ("name", "desc", "src", "type")
LINK_SUPPORTED_PROPERTIES = ("text", "type")

PtKind = Literal["wpt", "trkpt"]


def create_element(doc: Document, tag_name: str) -> Element:
    """Create an element in the GPX namespace (no prefix)."""
    return doc.createElementNS(GPX_NS, tag_name)


def append_text_element(doc: Document, parent: Element, tag_name: str, content: Any) -> Optional[Element]:
    """
    Create `<tag_name>content</tag_name>` and append it to parent.

    Nothing is written when content is None.
    """
    if content is None:
        return None
    el = create_element(doc, tag_name)
    text = content if isinstance(content, str) else format_decimal(content)
    el.appendChild(doc.createTextNode(text))
    parent.appendChild(el)
    return el


def _lookup(source: Any, key: str) -> Any:
    """Read `key` from a mapping or an options dataclass; None for anything else."""
    if isinstance(source, Mapping):
        return source.get(key)
    if is_dataclass(source) and not isinstance(source, type):
        return getattr(source, key, None)
    return None


def append_supported_properties(
    doc: Document,
    parent: Element,
    supports: Sequence[str],
    properties: Any,
) -> None:
    """
    Copy whitelisted string values onto parent as leaf tags.

    Only the keys in `supports` are looked up, in that order. Values that are
    missing, empty, or not strings are skipped. Mappings and options
    dataclasses (such as `Link`) are read; anything else is ignored entirely.
    """
    for key in supports:
        value = _lookup(properties, key)
        if value and isinstance(value, str):
            append_text_element(doc, parent, key, value)


def append_link(doc: Document, parent: Element, link: Any) -> Optional[Element]:
    """
    Append a <link> to parent.

    ```xml
    <link href="https://example.com">
        <text>Trail report</text>
        <type>text/html</type>
    </link>
    ```
    Skipped when href is empty.
    """
    href = _lookup(link, "href")
    if not href:
        return None
    el = create_element(doc, "link")
    el.setAttribute("href", str(href))
    append_supported_properties(doc, el, LINK_SUPPORTED_PROPERTIES, link)
    parent.appendChild(el)
    return el


def create_pt(
    doc: Document,
    kind: PtKind,
    position: Position,
    properties: Optional[Mapping[str, Any]] = None,
) -> Element:
    """
    Create a <wpt> or <trkpt>.

    wpt and trkpt share wptType, so one factory builds both:
    ```xml
    <wpt lat="46.96526" lon="-109.533691">
        <ele>3205</ele>
        <time>1685828773</time>
    </wpt>
    ```
    Position is GeoJSON order: [lon, lat, ele?, time?].
    """
    lon, lat = position[0], position[1]
    ele = position[2] if len(position) > 2 else None
    time = position[3] if len(position) > 3 else None

    el = create_element(doc, kind)
    el.setAttribute("lat", format_decimal(lat))
    el.setAttribute("lon", format_decimal(lon))
    append_text_element(doc, el, "ele", ele)
    append_text_element(doc, el, "time", time)
    append_supported_properties(doc, el, PT_SUPPORTED_PROPERTIES, properties)
    return el


def create_trk(doc: Document, properties: Optional[Mapping[str, Any]] = None) -> Element:
    """
    Create an empty <trk> carrying the feature's descriptive leaves.

    Segments are appended by the caller.
    ```xml
    <trk>
        <name>The Rut</name>
        <desc>A race in big sky montana</desc>
        <src>onX Maps</src>
        <type>Race</type>
    </trk>
    ```
    """
    el = create_element(doc, "trk")
    append_supported_properties(doc, el, TRK_SUPPORTED_PROPERTIES, properties)
    return el


def create_trkseg(doc: Document, coordinates: Iterable[Position]) -> Element:
    """
    Create a <trkseg> with one <trkpt> per position, in order.

    A segment is one continuous span of track data; a track broken by lost
    reception is written as several segments.
    """
    el = create_element(doc, "trkseg")
    for position in coordinates:
        el.appendChild(create_pt(doc, "trkpt", position))
    return el
