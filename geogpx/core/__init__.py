"""Core functionality modules for geogpx."""

__all__ = [
    "parser",
    "elements",
    "metadata",
    "converter",
    "config",
    "diagnostics",
]
