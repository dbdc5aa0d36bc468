"""File adapters: GeoJSON in, GPX out."""
