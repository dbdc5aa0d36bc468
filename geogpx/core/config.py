"""
Configuration management for geogpx.

Conversion options (creator and GPX metadata) can be kept in a YAML file so
repeated exports carry the same author, copyright and links:

    creator: My Race Series
    metadata:
      name: The Rut 50K
      author:
        name: Race Ops
        email: ops@example.com
        link: {href: "https://example.com", text: Race site}
      copyright: {author: Race Ops, year: "2023", license: "https://creativecommons.org/licenses/by/4.0/"}
      keywords: trail, ultra

By default `geogpx_config.yaml` (or `.yml`) in the current directory is used.
"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from geogpx.model import Bounds, ConversionOptions, Copyright, Link, MetaData, Person

DEFAULT_CONFIG_FILES = ("geogpx_config.yaml", "geogpx_config.yml")

_METADATA_TEXT_KEYS = ("name", "desc", "time", "keywords")


class ConfigError(ValueError):
    """Raised for configuration files that can not be used."""


def _text(data: Mapping[str, Any], key: str, label: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ConfigError(f"{label}.{key} must be a string")
    # YAML reads `year: 2023` as an int
    return str(value)


def _mapping(data: Mapping[str, Any], key: str, label: str) -> Optional[Mapping[str, Any]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ConfigError(f"{label}.{key} must be a mapping")
    return value


def _link_from_dict(data: Optional[Mapping[str, Any]], label: str) -> Optional[Link]:
    if data is None:
        return None
    href = _text(data, "href", label)
    if not href:
        raise ConfigError(f"{label}.href is required")
    return Link(href=href, text=_text(data, "text", label), type=_text(data, "type", label))


def metadata_from_dict(data: Mapping[str, Any]) -> MetaData:
    """Build MetaData from a plain mapping (the `metadata:` section)."""
    label = "metadata"
    meta = MetaData(**{key: _text(data, key, label) for key in _METADATA_TEXT_KEYS})

    author = _mapping(data, "author", label)
    if author is not None:
        meta.author = Person(
            name=_text(author, "name", "metadata.author"),
            email=_text(author, "email", "metadata.author"),
            link=_link_from_dict(_mapping(author, "link", "metadata.author"), "metadata.author.link"),
        )

    copyright = _mapping(data, "copyright", label)
    if copyright is not None:
        meta.copyright = Copyright(
            author=_text(copyright, "author", "metadata.copyright"),
            year=_text(copyright, "year", "metadata.copyright"),
            license=_text(copyright, "license", "metadata.copyright"),
        )

    meta.link = _link_from_dict(_mapping(data, "link", label), "metadata.link")

    bounds = _mapping(data, "bounds", label)
    if bounds is not None:
        values = {k: _text(bounds, k, "metadata.bounds") for k in ("minlat", "minlon", "maxlat", "maxlon")}
        missing = [k for k, v in values.items() if v is None]
        if missing:
            raise ConfigError(f"metadata.bounds is missing: {', '.join(missing)}")
        meta.bounds = Bounds(**values)

    return meta


def options_from_dict(data: Optional[Mapping[str, Any]]) -> ConversionOptions:
    """
    Build ConversionOptions from a plain mapping.

    Raises:
        ConfigError: if a value has the wrong shape
    """
    if data is None:
        return ConversionOptions()
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration must be a mapping at the top level")

    metadata = _mapping(data, "metadata", "config")
    return ConversionOptions(
        creator=_text(data, "creator", "config"),
        metadata=metadata_from_dict(metadata) if metadata is not None else None,
    )


def _loose_text(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _loose_mapping(data: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else None


def _loose_link(data: Optional[Mapping[str, Any]]) -> Optional[Link]:
    if data is None:
        return None
    # An empty href is kept; the writer omits links without one.
    return Link(href=_loose_text(data, "href") or "", text=_loose_text(data, "text"), type=_loose_text(data, "type"))


def options_from_mapping(data: Any) -> ConversionOptions:
    """
    Build ConversionOptions from a caller-supplied mapping without validating it.

    Values of the wrong shape are dropped instead of raising: a non-mapping
    sub-object is ignored, a link without `href` is kept but never written,
    and only strings and numbers are used as text. `load_config` uses the
    strict `options_from_dict` instead.
    """
    if not isinstance(data, Mapping):
        return ConversionOptions()

    creator = data.get("creator")
    metadata = _loose_mapping(data, "metadata")
    if metadata is None:
        return ConversionOptions(creator=creator if isinstance(creator, str) else None)

    meta = MetaData(**{key: _loose_text(metadata, key) for key in _METADATA_TEXT_KEYS})

    author = _loose_mapping(metadata, "author")
    if author is not None:
        meta.author = Person(
            name=_loose_text(author, "name"),
            email=_loose_text(author, "email"),
            link=_loose_link(_loose_mapping(author, "link")),
        )

    copyright = _loose_mapping(metadata, "copyright")
    if copyright is not None:
        meta.copyright = Copyright(
            author=_loose_text(copyright, "author"),
            year=_loose_text(copyright, "year"),
            license=_loose_text(copyright, "license"),
        )

    meta.link = _loose_link(_loose_mapping(metadata, "link"))

    bounds = _loose_mapping(metadata, "bounds")
    if bounds is not None:
        values = {k: _loose_text(bounds, k) for k in ("minlat", "minlon", "maxlat", "maxlon")}
        if None not in values.values():
            meta.bounds = Bounds(**values)

    return ConversionOptions(creator=creator if isinstance(creator, str) else None, metadata=meta)


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    return value


def options_to_dict(options: ConversionOptions) -> Dict[str, Any]:
    """Inverse of `options_from_dict`; unset fields are omitted."""
    return _drop_none(asdict(options))


def find_config_file(config_file: Optional[Path] = None) -> Optional[Path]:
    """Return the config file to use, looking in the current directory when none is given."""
    if config_file is not None:
        return Path(config_file)
    for name in DEFAULT_CONFIG_FILES:
        candidate = Path(name)
        if candidate.exists():
            return candidate
    return None


def load_config(config_file: Optional[Path] = None) -> ConversionOptions:
    """
    Load conversion options.

    Args:
        config_file: Optional path to a YAML config file.
                     If None, looks for 'geogpx_config.yaml' in current directory.

    Returns:
        ConversionOptions (empty when no config file exists)

    Raises:
        ConfigError: if the file is missing, not valid YAML, or has the wrong shape
    """
    path = find_config_file(config_file)
    if path is None:
        return ConversionOptions()
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    return options_from_dict(data or {})


def export_template(output_path: Path) -> None:
    """Write a commented configuration template."""
    template = {
        "creator": "geogpx",
        "metadata": {
            "name": "My Map",
            "desc": "Exported from GeoJSON",
            "author": {
                "name": "Your Name",
                "email": "you@example.com",
                "link": {"href": "https://example.com", "text": "Homepage"},
            },
            "copyright": {
                "author": "Your Name",
                "year": "2024",
                "license": "https://creativecommons.org/licenses/by/4.0/",
            },
            "keywords": "hiking, gpx",
        },
    }

    with open(output_path, "w", encoding="utf-8") as f:
        f.write("# geogpx configuration\n")
        f.write("# creator: value of the <gpx creator=...> attribute\n")
        f.write("# metadata: written to <metadata>; remove any field you do not need\n\n")
        yaml.dump(template, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
