"""
Geometry Builder

Turns OSM entities into geometries according to the ``geometry`` settings
section: every geometry gets the configured SRID, and linework is split with
segmentize whenever ``segment_max_length`` is set.
"""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from osmgeom.geom import (
    Geometry,
    create_linestring,
    create_multilinestring,
    create_point,
    create_polygon,
    segmentize,
)
from osmgeom.osm import NodeLike, WayLike
from osmgeom.settings import GeometrySettings, Settings


class GeometryBuilder:
    """Builds geometries from OSM entities using one set of geometry settings."""

    def __init__(self, settings: GeometrySettings | None = None):
        self.settings = settings or GeometrySettings()

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeometryBuilder":
        return cls(settings.geometry)

    def _split(self, geom: Geometry) -> Geometry:
        max_length = self.settings.segment_max_length
        if max_length is None or geom.is_null():
            return geom
        return segmentize(geom, max_length)

    def point(self, node: NodeLike) -> Geometry:
        return create_point(node, srid=self.settings.srid)

    def linestring(self, way: WayLike) -> Geometry:
        """Linestring for ``way``; a MultiLineString when segment_max_length is set."""
        return self._split(create_linestring(way, srid=self.settings.srid))

    def polygon(self, way: WayLike) -> Geometry:
        return create_polygon(way, srid=self.settings.srid)

    def multilinestring(self, ways: Iterable[WayLike]) -> Geometry:
        return self._split(create_multilinestring(ways, srid=self.settings.srid))

    def linestrings(self, ways: Iterable[WayLike]) -> list[Geometry]:
        """Build one line geometry per way, dropping ways that give Null."""
        result: list[Geometry] = []
        skipped = 0
        for way in ways:
            geom = self.linestring(way)
            if geom.is_null():
                skipped += 1
                continue
            result.append(geom)
        if skipped:
            logger.debug("GeometryBuilder skipped {} way(s) without a usable linestring", skipped)
        return result


__all__ = ["GeometryBuilder"]
