"""Multilinestring construction from several ways."""

from __future__ import annotations

from osmgeom.geom import LineString, MultiLineString, create_multilinestring, geometry_type, num_geometries
from tests.utils_osm import way


def test_create_multilinestring_drops_degenerate_ways():
    """Test create_multilinestring with some degenerate ways."""
    ways = [
        way("w1 Nn1x0y0,n2x1y0"),
        way("w2 Nn3"),
        way("w3 Nn4x5y5,n5x6y6,n6x7y5"),
    ]

    geom = create_multilinestring(ways)

    assert geom.is_multilinestring()
    assert geometry_type(geom) == "MULTILINESTRING"
    assert num_geometries(geom) == 2
    assert geom.get(MultiLineString) == MultiLineString([
        LineString([(0, 0), (1, 0)]),
        LineString([(5, 5), (6, 6), (7, 5)]),
    ])


def test_create_multilinestring_without_usable_ways_is_null():
    """Test create_multilinestring without usable ways."""
    assert create_multilinestring([way("w1 Nn1,n2"), way("w2 Nn3x1y1")]).is_null()
    assert create_multilinestring([]).is_null()
