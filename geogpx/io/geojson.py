"""
GeoJSON file reader.

Loads a `.geojson` / `.json` file and parses it into the typed model.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from geogpx.core.parser import parse_geojson
from geogpx.model import Feature, FeatureCollection


def read_geojson(path: Union[str, Path]) -> Union[Feature, FeatureCollection]:
    """
    Read a GeoJSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty, isn't valid JSON, or isn't GeoJSON
                    (GeoJSONError is a ValueError)
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    text = p.read_text(encoding="utf-8-sig")
    if not text.strip():
        raise ValueError(f"GeoJSON file is empty: {p}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid GeoJSON file (JSON parse error): {e}\nFile: {p}") from e

    return parse_geojson(data)
