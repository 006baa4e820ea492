"""
Generic Geometry Functions

Measurement and classification over every geometry variant. Each function
branches on the held variant explicitly and raises TypeMismatchError for a
value it does not know, so a new variant cannot slip through silently.
"""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Iterable

from osmgeom.exceptions import InvalidArgumentError, TypeMismatchError
from osmgeom.geom import contract
from osmgeom.geom.shapes import polygon_to_shapely, to_shapely
from osmgeom.geom.types import (
    Geometry,
    GeometryValue,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    NullGeometry,
    Point,
    Polygon,
    null_geometry,
)


def _unhandled(function: str, value: GeometryValue) -> TypeMismatchError:
    return TypeMismatchError(
        f"{function}: unhandled geometry variant {type(value).__name__}",
        {"function": function, "variant": type(value).__name__},
    )


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def line_length(line: LineString) -> float:
    return sum(distance(a, b) for a, b in pairwise(line))


def num_geometries(geom: Geometry) -> int:
    value = geom.value
    if isinstance(value, NullGeometry):
        return 0
    if isinstance(value, (Point, LineString, Polygon)):
        return 1
    if isinstance(value, (MultiPoint, MultiLineString, MultiPolygon)):
        return len(value)
    raise _unhandled("num_geometries", value)


def geometry_type(geom: Geometry) -> str:
    value = geom.value
    if isinstance(value, NullGeometry):
        return contract.NULL_TYPE_NAME
    if isinstance(value, Point):
        return contract.POINT_TYPE_NAME
    if isinstance(value, LineString):
        return contract.LINESTRING_TYPE_NAME
    if isinstance(value, Polygon):
        return contract.POLYGON_TYPE_NAME
    if isinstance(value, MultiPoint):
        return contract.MULTIPOINT_TYPE_NAME
    if isinstance(value, MultiLineString):
        return contract.MULTILINESTRING_TYPE_NAME
    if isinstance(value, MultiPolygon):
        return contract.MULTIPOLYGON_TYPE_NAME
    raise _unhandled("geometry_type", value)


def dimension(geom: Geometry) -> int:
    value = geom.value
    if isinstance(value, (NullGeometry, Point, MultiPoint)):
        return 0
    if isinstance(value, (LineString, MultiLineString)):
        return 1
    if isinstance(value, (Polygon, MultiPolygon)):
        return 2
    raise _unhandled("dimension", value)


def area(geom: Geometry) -> float:
    """Planar area in the units of the coordinates.

    Points and lines have no area and return exactly 0.0.
    """
    value = geom.value
    if isinstance(value, (NullGeometry, Point, LineString, MultiPoint, MultiLineString)):
        return 0.0
    if isinstance(value, Polygon):
        return float(polygon_to_shapely(value).area)
    if isinstance(value, MultiPolygon):
        return sum(float(polygon_to_shapely(p).area) for p in value)
    raise _unhandled("area", value)


def length(geom: Geometry) -> float:
    value = geom.value
    if isinstance(value, (NullGeometry, Point, MultiPoint, Polygon, MultiPolygon)):
        return 0.0
    if isinstance(value, LineString):
        return line_length(value)
    if isinstance(value, MultiLineString):
        return sum(line_length(line) for line in value)
    raise _unhandled("length", value)


def _mean(points: Iterable[Point]) -> Point:
    xs: list[float] = []
    ys: list[float] = []
    for p in points:
        xs.append(p.x)
        ys.append(p.y)
    return Point(sum(xs) / len(xs), sum(ys) / len(ys))


def _weighted(parts: list[tuple[Point, float]]) -> Point:
    total = sum(weight for _, weight in parts)
    return Point(
        sum(p.x * weight for p, weight in parts) / total,
        sum(p.y * weight for p, weight in parts) / total,
    )


def _line_centroid(line: LineString) -> tuple[Point, float]:
    """Centroid and length of a line; zero-length lines fall back to the point mean."""
    if len(line) == 2:
        a, b = line
        return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0), distance(a, b)
    parts = [
        (Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0), distance(a, b))
        for a, b in pairwise(line)
    ]
    total = sum(weight for _, weight in parts)
    if total == 0.0:
        return _mean(line), 0.0
    return _weighted(parts), total


def centroid(geom: Geometry) -> Geometry:
    """Return the centroid as a Point geometry with the input's SRID.

    Lines are weighted by length, polygons by area. An empty line or
    collection yields a Null geometry. Null input is a contract violation.
    """
    value = geom.value
    if isinstance(value, NullGeometry):
        raise TypeMismatchError("centroid is undefined for a Null geometry", {"function": "centroid"})
    if isinstance(value, Point):
        return Geometry(value, srid=geom.srid)
    if isinstance(value, (LineString, MultiLineString)):
        lines = [value] if isinstance(value, LineString) else [line for line in value if len(line)]
        if not lines or not len(lines[0]):
            return null_geometry(geom.srid)
        parts = [_line_centroid(line) for line in lines]
        if len(parts) == 1:
            return Geometry(parts[0][0], srid=geom.srid)
        if sum(weight for _, weight in parts) == 0.0:
            return Geometry(_mean(p for line in lines for p in line), srid=geom.srid)
        return Geometry(_weighted(parts), srid=geom.srid)
    if isinstance(value, MultiPoint):
        if not len(value):
            return null_geometry(geom.srid)
        return Geometry(_mean(value), srid=geom.srid)
    if isinstance(value, (Polygon, MultiPolygon)):
        shape = to_shapely(geom)
        if shape is None or shape.is_empty:
            return null_geometry(geom.srid)
        center = shape.centroid
        if center.is_empty:
            return null_geometry(geom.srid)
        return Geometry(Point(center.x, center.y), srid=geom.srid)
    raise _unhandled("centroid", value)


def geometry_n(geom: Geometry, n: int) -> Geometry:
    """Return the n-th member (1-based) of ``geom`` or Null when out of range.

    Singular geometries are their own first member.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"geometry_n index must be an integer, got {n!r}")
    value = geom.value
    if isinstance(value, NullGeometry):
        return null_geometry(geom.srid)
    if isinstance(value, (Point, LineString, Polygon)):
        return geom if n == 1 else null_geometry(geom.srid)
    if isinstance(value, (MultiPoint, MultiLineString, MultiPolygon)):
        if 1 <= n <= len(value):
            return Geometry(value[n - 1], srid=geom.srid)
        return null_geometry(geom.srid)
    raise _unhandled("geometry_n", value)


def reverse(geom: Geometry) -> Geometry:
    """Reverse the point order of lines; other variants come back unchanged."""
    value = geom.value
    if isinstance(value, (NullGeometry, Point, Polygon, MultiPoint, MultiPolygon)):
        return geom
    if isinstance(value, LineString):
        return Geometry(LineString(value.points[::-1]), srid=geom.srid)
    if isinstance(value, MultiLineString):
        return Geometry(
            MultiLineString([LineString(line.points[::-1]) for line in value]),
            srid=geom.srid,
        )
    raise _unhandled("reverse", value)


__all__ = [
    "num_geometries",
    "geometry_type",
    "dimension",
    "area",
    "length",
    "centroid",
    "geometry_n",
    "reverse",
    "distance",
    "line_length",
]
