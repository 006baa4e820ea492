"""
Geometry Constructors

Build geometry values from OSM nodes and ways. Node references whose location
cannot be resolved are dropped before any shape is assembled; input that is too
degenerate for the requested shape produces a Null geometry instead of an error.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from loguru import logger
from shapely.geometry import LinearRing

from osmgeom.geom.contract import DEFAULT_SRID, MIN_LINESTRING_POINTS, MIN_RING_POINTS
from osmgeom.geom.types import Geometry, LineString, MultiLineString, Point, Polygon, Ring, null_geometry
from osmgeom.osm import Location, NodeLike, NodeRefLike, WayLike


def _resolved(location: Location | None) -> bool:
    return location is not None and location.is_valid()


def _located(nodes: Iterable[NodeRefLike]) -> Iterator[Point]:
    for node in nodes:
        if _resolved(node.location):
            yield Point(node.location.lon, node.location.lat)


def _compact_points(nodes: Iterable[NodeRefLike]) -> list[Point]:
    """Resolved locations in reference order, with consecutive repeats collapsed."""
    points: list[Point] = []
    for point in _located(nodes):
        if points and points[-1] == point:
            continue
        points.append(point)
    return points


def create_point(node: NodeLike, srid: int = DEFAULT_SRID) -> Geometry:
    if not _resolved(node.location):
        logger.debug("Node {} has no valid location, no point created", node.id)
        return null_geometry(srid)
    return Geometry(Point(node.location.lon, node.location.lat), srid=srid)


def create_linestring(way: WayLike, srid: int = DEFAULT_SRID) -> Geometry:
    """Build a linestring from the resolvable node locations of ``way``.

    Returns a Null geometry when fewer than two distinct positions remain.
    """
    points = _compact_points(way.nodes)
    if len(points) < MIN_LINESTRING_POINTS:
        logger.debug(
            "Way {} resolves to {} distinct location(s), no linestring created",
            way.id,
            len(points),
        )
        return null_geometry(srid)
    return Geometry(LineString(points), srid=srid)


def create_polygon(way: WayLike, srid: int = DEFAULT_SRID) -> Geometry:
    """Build a single-ring polygon from a closed way.

    The outer ring is stored counter-clockwise. Open ways and rings with fewer
    than four points produce a Null geometry.
    """
    points = _compact_points(way.nodes)
    if len(points) < MIN_RING_POINTS or points[0] != points[-1]:
        logger.debug("Way {} is not a closed ring ({} points), no polygon created", way.id, len(points))
        return null_geometry(srid)
    if not LinearRing([(p.x, p.y) for p in points]).is_ccw:
        points.reverse()
    return Geometry(Polygon(Ring(points)), srid=srid)


def create_multilinestring(ways: Iterable[WayLike], srid: int = DEFAULT_SRID) -> Geometry:
    """One linestring per way; ways without a usable linestring are skipped."""
    lines: list[LineString] = []
    for way in ways:
        geom = create_linestring(way, srid=srid)
        if geom.is_null():
            continue
        lines.append(geom.get(LineString))
    if not lines:
        return null_geometry(srid)
    return Geometry(MultiLineString(lines), srid=srid)


__all__ = [
    "create_point",
    "create_linestring",
    "create_polygon",
    "create_multilinestring",
]
