"""Geometry values, constructors, generic functions and transforms."""

from __future__ import annotations

from osmgeom.geom.from_osm import create_linestring, create_multilinestring, create_point, create_polygon
from osmgeom.geom.functions import (
    area,
    centroid,
    dimension,
    geometry_n,
    geometry_type,
    length,
    num_geometries,
    reverse,
)
from osmgeom.geom.segmentize import segmentize
from osmgeom.geom.shapes import from_shapely, to_shapely
from osmgeom.geom.types import (
    GEOMETRY_VARIANTS,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    NullGeometry,
    Point,
    Polygon,
    Ring,
    null_geometry,
)

__all__ = [
    "GEOMETRY_VARIANTS",
    "Geometry",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "NullGeometry",
    "Point",
    "Polygon",
    "Ring",
    "null_geometry",
    "create_point",
    "create_linestring",
    "create_polygon",
    "create_multilinestring",
    "num_geometries",
    "geometry_type",
    "dimension",
    "area",
    "length",
    "centroid",
    "geometry_n",
    "reverse",
    "segmentize",
    "to_shapely",
    "from_shapely",
]
