"""
GPX serialization.

Writes a document built by `geogpx.convert` to text. The document carries its
own `xml` processing instruction; it is emitted as the XML declaration instead
of letting minidom add a second one.
"""

from __future__ import annotations

from pathlib import Path
from xml.dom.minidom import Document, ProcessingInstruction

DEFAULT_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _declaration(doc: Document) -> str:
    for node in doc.childNodes:
        if isinstance(node, ProcessingInstruction) and node.target == "xml":
            return f"<?xml {node.data}?>"
    return DEFAULT_DECLARATION


def to_xml_string(doc: Document, *, pretty: bool = True) -> str:
    """
    Serialize a GPX document.

    Args:
        doc: Document returned by `convert`
        pretty: Indent nested elements (two spaces); leaf text stays inline

    Returns:
        XML text, declaration first
    """
    root = doc.documentElement
    if root is None:
        raise ValueError("Document has no root element")

    if pretty:
        body = root.toprettyxml(indent="  ")
    else:
        body = root.toxml()
    return f"{_declaration(doc)}\n{body}"


def write_gpx(doc: Document, output_path: Path, *, pretty: bool = True) -> int:
    """
    Write a GPX document to disk as UTF-8.

    Returns:
        File size in bytes
    """
    output_path = Path(output_path)
    output_path.write_text(to_xml_string(doc, pretty=pretty), encoding="utf-8")
    return output_path.stat().st_size
