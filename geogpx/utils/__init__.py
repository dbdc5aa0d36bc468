"""Utility modules for geogpx."""
