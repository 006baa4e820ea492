"""Geometry kernel turning OSM nodes and ways into typed vector geometries."""

__version__ = "0.1.0"
