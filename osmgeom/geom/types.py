"""
Geometry Value Types

Immutable variant classes and the ``Geometry`` value that holds exactly one of
them. Coordinate data lives in tuples of frozen points, so a geometry can be
shared freely between threads and never aliases another geometry's storage.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar, Union

from osmgeom.exceptions import InvalidArgumentError, TypeMismatchError
from osmgeom.geom.contract import DEFAULT_SRID, MIN_RING_POINTS


@dataclass(frozen=True)
class Point:
    """2D coordinate pair."""
    x: float
    y: float

    def __post_init__(self) -> None:
        try:
            x, y = float(self.x), float(self.y)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Point coordinates must be numbers, got ({self.x!r}, {self.y!r})"
            ) from exc
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidArgumentError(f"Point coordinates must be finite, got ({x}, {y})")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def num_geometries(self) -> int:
        return 1


def _as_point(value: Point | Sequence[float]) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


@dataclass(frozen=True)
class _PointSequence(Sequence):
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(_as_point(p) for p in self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: Any) -> Any:
        return self.points[index]

    def is_empty(self) -> bool:
        return not self.points


@dataclass(frozen=True)
class LineString(_PointSequence):
    """Ordered path of points. Empty and single-point lines are allowed but degenerate."""

    def num_geometries(self) -> int:
        return 1


@dataclass(frozen=True)
class Ring(_PointSequence):
    """Closed point sequence bounding a polygon."""

    def is_closed(self) -> bool:
        return len(self.points) > 1 and self.points[0] == self.points[-1]


def _check_ring(ring: Ring, allow_empty: bool = False) -> None:
    if allow_empty and ring.is_empty():
        return
    if len(ring) < MIN_RING_POINTS or not ring.is_closed():
        raise InvalidArgumentError(
            f"Polygon ring must be closed with at least {MIN_RING_POINTS} points, got {len(ring)}",
            {"points": str(len(ring)), "closed": str(ring.is_closed())},
        )


@dataclass(frozen=True)
class Polygon:
    outer: Ring = field(default_factory=Ring)
    inners: tuple[Ring, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.outer, Ring):
            object.__setattr__(self, "outer", Ring(self.outer))
        object.__setattr__(
            self,
            "inners",
            tuple(ring if isinstance(ring, Ring) else Ring(ring) for ring in self.inners),
        )
        if self.inners and self.outer.is_empty():
            raise InvalidArgumentError("Polygon with inner rings needs an outer ring")
        _check_ring(self.outer, allow_empty=True)
        for ring in self.inners:
            _check_ring(ring)

    def num_geometries(self) -> int:
        return 1


@dataclass(frozen=True)
class _Collection(Sequence):
    geoms: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "geoms", tuple(self._coerce(g) for g in self.geoms))

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self.geoms)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.geoms)

    def __getitem__(self, index: Any) -> Any:
        return self.geoms[index]

    def num_geometries(self) -> int:
        return len(self.geoms)


@dataclass(frozen=True)
class MultiPoint(_Collection):
    geoms: tuple[Point, ...] = ()

    @classmethod
    def _coerce(cls, value: Any) -> Point:
        return _as_point(value)


@dataclass(frozen=True)
class MultiLineString(_Collection):
    geoms: tuple[LineString, ...] = ()

    @classmethod
    def _coerce(cls, value: Any) -> LineString:
        return value if isinstance(value, LineString) else LineString(value)


@dataclass(frozen=True)
class MultiPolygon(_Collection):
    geoms: tuple[Polygon, ...] = ()

    @classmethod
    def _coerce(cls, value: Any) -> Polygon:
        if not isinstance(value, Polygon):
            raise TypeMismatchError(f"MultiPolygon members must be Polygon, got {type(value).__name__}")
        return value


@dataclass(frozen=True)
class NullGeometry:
    """Marks that no geometry could be derived from the input."""

    def num_geometries(self) -> int:
        return 0


GeometryValue = Union[NullGeometry, Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon]

GEOMETRY_VARIANTS: tuple[type, ...] = (
    NullGeometry,
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
)

V = TypeVar("V", NullGeometry, Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon)


@dataclass(frozen=True)
class Geometry:
    """Tagged geometry value: exactly one variant plus its spatial reference id."""
    value: GeometryValue = field(default_factory=NullGeometry)
    srid: int = DEFAULT_SRID

    def __post_init__(self) -> None:
        if type(self.value) not in GEOMETRY_VARIANTS:
            raise TypeMismatchError(
                f"Unsupported geometry variant: {type(self.value).__name__}",
                {"variant": type(self.value).__name__},
            )

    @property
    def variant(self) -> type:
        return type(self.value)

    def get(self, variant: type[V]) -> V:
        """Return the held value if it is a ``variant``, else raise TypeMismatchError."""
        if type(self.value) is not variant:
            raise TypeMismatchError(
                f"Geometry holds {type(self.value).__name__}, not {variant.__name__}",
                {"expected": variant.__name__, "actual": type(self.value).__name__},
            )
        return self.value  # type: ignore[return-value]

    def is_null(self) -> bool:
        return type(self.value) is NullGeometry

    def is_point(self) -> bool:
        return type(self.value) is Point

    def is_linestring(self) -> bool:
        return type(self.value) is LineString

    def is_polygon(self) -> bool:
        return type(self.value) is Polygon

    def is_multipoint(self) -> bool:
        return type(self.value) is MultiPoint

    def is_multilinestring(self) -> bool:
        return type(self.value) is MultiLineString

    def is_multipolygon(self) -> bool:
        return type(self.value) is MultiPolygon

    def is_multi(self) -> bool:
        return isinstance(self.value, _Collection)


def null_geometry(srid: int = DEFAULT_SRID) -> Geometry:
    return Geometry(NullGeometry(), srid=srid)


__all__ = [
    "Point",
    "LineString",
    "Ring",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "NullGeometry",
    "Geometry",
    "GeometryValue",
    "GEOMETRY_VARIANTS",
    "null_geometry",
]
