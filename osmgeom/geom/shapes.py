"""Conversion between osmgeom geometry values and shapely geometries."""

from __future__ import annotations

from shapely import geometry as sg
from shapely.geometry.base import BaseGeometry

from osmgeom.exceptions import TypeMismatchError, UnsupportedGeometryError
from osmgeom.geom.contract import DEFAULT_SRID
from osmgeom.geom.types import (
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


def _coords(points) -> list[tuple[float, float]]:
    return [(p.x, p.y) for p in points]


def polygon_to_shapely(polygon: Polygon) -> sg.Polygon:
    return sg.Polygon(_coords(polygon.outer), [_coords(ring) for ring in polygon.inners])


def to_shapely(geom: Geometry) -> BaseGeometry | None:
    """Return the shapely equivalent of ``geom``, or None for a Null geometry."""
    value = geom.value
    if isinstance(value, NullGeometry):
        return None
    if isinstance(value, Point):
        return sg.Point(value.x, value.y)
    if isinstance(value, LineString):
        return sg.LineString(_coords(value))
    if isinstance(value, Polygon):
        return polygon_to_shapely(value)
    if isinstance(value, MultiPoint):
        return sg.MultiPoint(_coords(value))
    if isinstance(value, MultiLineString):
        return sg.MultiLineString([_coords(line) for line in value])
    if isinstance(value, MultiPolygon):
        return sg.MultiPolygon([polygon_to_shapely(p) for p in value])
    raise TypeMismatchError(f"to_shapely: unhandled variant {type(value).__name__}")


def _polygon_from_shapely(shape: sg.Polygon) -> Polygon:
    return Polygon(
        Ring([c[:2] for c in shape.exterior.coords]),
        tuple(Ring([c[:2] for c in ring.coords]) for ring in shape.interiors),
    )


def from_shapely(shape: BaseGeometry | None, srid: int = DEFAULT_SRID) -> Geometry:
    """Build a geometry value from a shapely geometry; empty or None gives Null."""
    if shape is None or shape.is_empty:
        return null_geometry(srid)
    if isinstance(shape, sg.Point):
        return Geometry(Point(shape.x, shape.y), srid=srid)
    if isinstance(shape, sg.LineString):
        return Geometry(LineString([c[:2] for c in shape.coords]), srid=srid)
    if isinstance(shape, sg.Polygon):
        return Geometry(_polygon_from_shapely(shape), srid=srid)
    if isinstance(shape, sg.MultiPoint):
        return Geometry(MultiPoint([(p.x, p.y) for p in shape.geoms]), srid=srid)
    if isinstance(shape, sg.MultiLineString):
        return Geometry(
            MultiLineString([LineString([c[:2] for c in line.coords]) for line in shape.geoms]),
            srid=srid,
        )
    if isinstance(shape, sg.MultiPolygon):
        return Geometry(MultiPolygon([_polygon_from_shapely(p) for p in shape.geoms]), srid=srid)
    raise UnsupportedGeometryError(
        f"No geometry variant for shapely type {shape.geom_type}",
        {"geom_type": shape.geom_type},
    )


__all__ = ["to_shapely", "from_shapely", "polygon_to_shapely"]
