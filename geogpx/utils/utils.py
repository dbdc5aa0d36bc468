"""
Utility functions for geogpx.

This module contains helper functions for number formatting,
file size formatting, and output path handling.
"""

from decimal import Decimal
from pathlib import Path
from typing import Any, Optional


def format_decimal(value: Any) -> str:
    """
    Format a number as an xsd:decimal-compatible string.

    Floats use the shortest representation that round-trips, expanded to
    plain notation (GPX attributes do not accept exponents). Integral
    floats drop the trailing ".0".

    Args:
        value: int, float, or an already-formatted string

    Returns:
        Decimal text

    Example:
        >>> format_decimal(46.965260)
        '46.96526'
        >>> format_decimal(3205.0)
        '3205'
        >>> format_decimal(1e-07)
        '0.0000001'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        # bool is an int subclass; keep its own spelling rather than 1/0
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return repr(value)
        if value.is_integer():
            return str(int(value))
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return str(value)


def format_file_size(size_bytes: int) -> str:
    """
    Format a file size in bytes to a human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "2.4 MB", "156 KB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def ensure_output_dir(output_path: Path) -> Path:
    """
    Ensure the output directory exists, creating it if necessary.

    Args:
        output_path: Path to the output directory

    Returns:
        The resolved absolute path
    """
    output_path = Path(output_path).resolve()
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def default_output_path(input_path: Path, output: Optional[Path] = None) -> Path:
    """
    Resolve where a converted GPX file should be written.

    - No output given: next to the input, same stem, `.gpx` suffix.
    - Output is an existing directory: inside it, same stem, `.gpx` suffix.
    - Otherwise the output path is used as-is.
    """
    input_path = Path(input_path)
    if output is None:
        return input_path.with_suffix(".gpx")
    output = Path(output)
    if output.is_dir():
        return output / f"{input_path.stem}.gpx"
    return output
