"""Unit tests for geogpx.core.elements factories."""

from xml.dom.minidom import getDOMImplementation

import pytest

from geogpx.core.elements import (
    GPX_NS,
    append_link,
    append_supported_properties,
    append_text_element,
    create_element,
    create_pt,
    create_trk,
    create_trkseg,
)
from geogpx.model import Link


@pytest.fixture
def doc():
    return getDOMImplementation().createDocument(None, None, None)


def tags(el):
    return [n.tagName for n in el.childNodes if n.nodeType == n.ELEMENT_NODE]


def text(el, tag):
    return el.getElementsByTagName(tag)[0].firstChild.data


class TestTextElements:
    def test_none_writes_nothing(self, doc):
        parent = create_element(doc, "wpt")
        assert append_text_element(doc, parent, "ele", None) is None
        assert tags(parent) == []

    def test_zero_is_written(self, doc):
        parent = create_element(doc, "wpt")
        append_text_element(doc, parent, "ele", 0)
        assert text(parent, "ele") == "0"

    def test_elements_use_gpx_namespace(self, doc):
        assert create_element(doc, "trk").namespaceURI == GPX_NS


class TestSupportedProperties:
    def test_whitelist_order_and_string_only(self, doc):
        parent = create_element(doc, "wpt")
        props = {
            "type": "Summit",
            "name": "Lone Peak",
            "desc": 42,
            "src": None,
            "ele": "ignored",
            "stroke": "#FF0000",
        }
        append_supported_properties(doc, parent, ("name", "desc", "src", "type"), props)
        assert tags(parent) == ["name", "type"]
        assert text(parent, "name") == "Lone Peak"

    def test_empty_string_is_dropped(self, doc):
        parent = create_element(doc, "wpt")
        append_supported_properties(doc, parent, ("name",), {"name": ""})
        assert tags(parent) == []

    @pytest.mark.parametrize("props", [None, "name", 7, ["name"]])
    def test_non_mapping_properties_are_ignored(self, doc, props):
        parent = create_element(doc, "trk")
        append_supported_properties(doc, parent, ("name",), props)
        assert tags(parent) == []


class TestPoints:
    def test_lat_lon_swap_from_geojson_order(self, doc):
        el = create_pt(doc, "wpt", [-114.5, 45.5])
        assert el.tagName == "wpt"
        assert el.getAttribute("lat") == "45.5"
        assert el.getAttribute("lon") == "-114.5"
        assert tags(el) == []

    def test_ele_and_time(self, doc):
        el = create_pt(doc, "trkpt", [1.0, 2.0, 1500.5, "2023-06-03T21:46:13Z"])
        assert tags(el) == ["ele", "time"]
        assert text(el, "ele") == "1500.5"
        assert text(el, "time") == "2023-06-03T21:46:13Z"

    def test_numeric_time(self, doc):
        el = create_pt(doc, "wpt", [0, 0, 3205, 1685828773])
        assert text(el, "time") == "1685828773"

    def test_time_without_elevation(self, doc):
        el = create_pt(doc, "wpt", [0, 0, None, "2023-06-03T21:46:13Z"])
        assert tags(el) == ["time"]

    def test_properties_after_ele_time(self, doc):
        el = create_pt(doc, "wpt", [0, 0, 10], {"name": "Camp", "src": "GPS"})
        assert tags(el) == ["ele", "name", "src"]

    def test_integral_float_elevation(self, doc):
        el = create_pt(doc, "wpt", [0, 0, 3205.0])
        assert text(el, "ele") == "3205"


class TestTracks:
    def test_trk_only_carries_leaves(self, doc):
        el = create_trk(doc, {"name": "The Rut", "desc": "A race in big sky montana", "src": "onX Maps", "type": "Race"})
        assert tags(el) == ["name", "desc", "src", "type"]

    def test_trk_without_properties(self, doc):
        assert tags(create_trk(doc)) == []

    def test_trkseg_preserves_order(self, doc):
        seg = create_trkseg(doc, [[0, 0], [1, 2], [3, 4]])
        assert tags(seg) == ["trkpt", "trkpt", "trkpt"]
        lats = [p.getAttribute("lat") for p in seg.childNodes]
        assert lats == ["0", "2", "4"]

    def test_empty_trkseg(self, doc):
        assert tags(create_trkseg(doc, [])) == []


class TestLinks:
    def test_link_with_text_and_type(self, doc):
        parent = create_element(doc, "metadata")
        el = append_link(doc, parent, Link(href="https://example.com", text="Site", type="text/html"))
        assert el is not None
        assert el.getAttribute("href") == "https://example.com"
        assert tags(el) == ["text", "type"]
        assert tags(parent) == ["link"]

    @pytest.mark.parametrize("href", ["", None])
    def test_link_without_href_is_skipped(self, doc, href):
        parent = create_element(doc, "metadata")
        assert append_link(doc, parent, Link(href=href, text="Site", type="text/html")) is None
        assert tags(parent) == []

    def test_link_from_mapping(self, doc):
        parent = create_element(doc, "author")
        append_link(doc, parent, {"href": "https://example.com"})
        assert tags(parent) == ["link"]
