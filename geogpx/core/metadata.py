"""
<metadata> assembly from conversion options.

See http://www.topografix.com/GPX/1/1/#type_metadataType. Child order is
fixed by the schema: name, desc, author, copyright, link, time, keywords,
bounds. `bounds` is not written.
"""

from __future__ import annotations

from typing import Any, Optional
from xml.dom.minidom import Document, Element

from geogpx.core.elements import append_link, append_text_element, create_element
from geogpx.model import Copyright, Link, MetaData, Person


def _create_author(doc: Document, person: Person) -> Element:
    author = create_element(doc, "author")
    append_text_element(doc, author, "name", person.name)
    append_text_element(doc, author, "email", person.email)
    if isinstance(person.link, Link):
        append_link(doc, author, person.link)
    return author


def _create_copyright(doc: Document, copyright: Copyright) -> Element:
    el = create_element(doc, "copyright")
    if copyright.author:
        el.setAttribute("author", copyright.author)
    append_text_element(doc, el, "year", copyright.year)
    append_text_element(doc, el, "license", copyright.license)
    return el


def create_metadata(doc: Document, meta: Any) -> Optional[Element]:
    """
    Build a <metadata> element, or None when no metadata was given.

    Sub-objects of the wrong type (author, copyright, link) are skipped
    rather than rejected.
    """
    if not isinstance(meta, MetaData):
        return None

    metadata = create_element(doc, "metadata")
    append_text_element(doc, metadata, "name", meta.name)
    append_text_element(doc, metadata, "desc", meta.desc)
    if isinstance(meta.author, Person):
        metadata.appendChild(_create_author(doc, meta.author))
    if isinstance(meta.copyright, Copyright):
        metadata.appendChild(_create_copyright(doc, meta.copyright))
    if isinstance(meta.link, Link):
        append_link(doc, metadata, meta.link)
    append_text_element(doc, metadata, "time", meta.time)
    append_text_element(doc, metadata, "keywords", meta.keywords)
    return metadata
