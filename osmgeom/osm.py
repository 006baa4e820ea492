"""Input collaborator types: nodes and ways as delivered by an OSM data source."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol, Sequence


@dataclass(frozen=True)
class Location:
    """WGS84 longitude/latitude of a node."""
    lon: float
    lat: float

    def is_valid(self) -> bool:
        return (
            math.isfinite(self.lon)
            and math.isfinite(self.lat)
            and -180.0 <= self.lon <= 180.0
            and -90.0 <= self.lat <= 90.0
        )


class NodeRefLike(Protocol):
    ref: int
    location: Location | None


class NodeLike(Protocol):
    id: int
    location: Location | None


class WayLike(Protocol):
    id: int
    nodes: Sequence[NodeRefLike]


@dataclass(frozen=True)
class NodeRef:
    ref: int
    location: Location | None = None


@dataclass(frozen=True)
class Node:
    id: int
    location: Location | None = None


@dataclass(frozen=True)
class Way:
    id: int
    nodes: tuple[NodeRef, ...] = field(default_factory=tuple)


__all__ = [
    "Location",
    "NodeRef",
    "Node",
    "Way",
    "NodeRefLike",
    "NodeLike",
    "WayLike",
]
