"""Tests for the tagged geometry value."""

from __future__ import annotations

import dataclasses

import pytest

from osmgeom.exceptions import InvalidArgumentError, TypeMismatchError
from osmgeom.geom import (
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

SQUARE = Polygon([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])

SAMPLES = {
    NullGeometry: NullGeometry(),
    Point: Point(1, 2),
    LineString: LineString([(0, 0), (1, 1)]),
    Polygon: SQUARE,
    MultiPoint: MultiPoint([(0, 0), (2, 2)]),
    MultiLineString: MultiLineString([[(0, 0), (1, 0)], [(0, 1), (1, 1)]]),
    MultiPolygon: MultiPolygon([SQUARE]),
}

QUERIES = {
    NullGeometry: "is_null",
    Point: "is_point",
    LineString: "is_linestring",
    Polygon: "is_polygon",
    MultiPoint: "is_multipoint",
    MultiLineString: "is_multilinestring",
    MultiPolygon: "is_multipolygon",
}


def test_default_geometry_is_null():
    """Test the default Geometry value."""
    geom = Geometry()
    assert geom.is_null()
    assert geom == null_geometry()
    assert geom.srid == 4326


@pytest.mark.parametrize("variant", GEOMETRY_VARIANTS, ids=lambda v: v.__name__)
def test_exactly_one_query_is_true(variant):
    """Test the is_* queries per variant."""
    geom = Geometry(SAMPLES[variant])

    for other, query in QUERIES.items():
        assert getattr(geom, query)() is (other is variant)
    assert geom.variant is variant
    assert geom.is_multi() is variant.__name__.startswith("Multi")


@pytest.mark.parametrize("variant", GEOMETRY_VARIANTS, ids=lambda v: v.__name__)
def test_checked_accessor(variant):
    """Test the checked get() accessor."""
    geom = Geometry(SAMPLES[variant])

    assert geom.get(variant) is SAMPLES[variant]
    for other in GEOMETRY_VARIANTS:
        if other is variant:
            continue
        with pytest.raises(TypeMismatchError) as excinfo:
            geom.get(other)
        assert excinfo.value.details == {"expected": other.__name__, "actual": variant.__name__}


def test_geometry_rejects_foreign_values():
    """Test Geometry with a value that is not a variant."""
    with pytest.raises(TypeMismatchError):
        Geometry((1.0, 2.0))


def test_values_of_different_variants_are_never_equal():
    """Test equality across variants."""
    points = [(0, 0), (1, 0), (1, 1), (0, 0)]
    assert LineString(points) != Ring(points)
    assert Geometry(LineString(points)) != Geometry(MultiPoint(points))
    assert Geometry(MultiLineString([points])) != Geometry(LineString(points))


def test_equality_is_order_sensitive():
    """Test that point order matters for equality."""
    assert LineString([(0, 0), (1, 1)]) == LineString([Point(0, 0), Point(1, 1)])
    assert LineString([(0, 0), (1, 1)]) != LineString([(1, 1), (0, 0)])


def test_geometries_are_immutable():
    """Test that geometry values cannot be modified."""
    geom = Geometry(LineString([(0, 0), (1, 1)]))
    with pytest.raises(dataclasses.FrozenInstanceError):
        geom.srid = 3857
    with pytest.raises(dataclasses.FrozenInstanceError):
        geom.value.points = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        Point(0, 0).x = 1.0


def test_coordinates_are_copied_from_input():
    """Test that values do not share the caller's list."""
    source = [(0, 0), (1, 1)]
    line = LineString(source)
    source.append((2, 2))
    assert len(line) == 2


def test_point_requires_finite_coordinates():
    """Test that non-finite coordinates raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        Point(float("nan"), 0)
    with pytest.raises(InvalidArgumentError):
        Point(0, float("inf"))


@pytest.mark.parametrize("x, y", [("a", 0), (0, None), ([1], 2)])
def test_point_requires_numeric_coordinates(x, y):
    """Test that non-numeric coordinates raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        Point(x, y)


def test_multipolygon_requires_polygons():
    """Test MultiPolygon with non-polygon members."""
    with pytest.raises(TypeMismatchError):
        MultiPolygon([[(0, 0), (1, 0), (1, 1), (0, 0)]])


def test_num_geometries_on_values():
    """Test num_geometries on variant values."""
    assert NullGeometry().num_geometries() == 0
    assert SQUARE.num_geometries() == 1
    assert MultiPoint([(0, 0), (1, 1), (2, 2)]).num_geometries() == 3
    assert MultiLineString().num_geometries() == 0
