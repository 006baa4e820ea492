"""
Segmentize Transform

Split lines so that no edge of the result is longer than a given bound.

A line whose edges all fit the bound is passed through untouched as a single
output line. As soon as one edge is too long, the whole line is broken up into
one output line per edge, and every too-long edge is further cut into pieces of
exactly ``max_length`` plus a shorter remainder piece. Consumers rely on this
exact output shape, so the pass-through case must not be "normalized" into
per-edge output.
"""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Sequence

from loguru import logger

from osmgeom.exceptions import InvalidArgumentError
from osmgeom.geom.contract import SEGMENTIZE_REMAINDER_TOLERANCE
from osmgeom.geom.functions import distance
from osmgeom.geom.types import Geometry, LineString, MultiLineString, Point


def _interpolate(start: Point, end: Point, t: float) -> Point:
    return Point(start.x + t * (end.x - start.x), start.y + t * (end.y - start.y))


def _split_edge(start: Point, end: Point, edge_length: float, max_length: float) -> list[LineString]:
    count = math.floor(edge_length / max_length)
    remainder = edge_length - count * max_length
    has_remainder = remainder > max_length * SEGMENTIZE_REMAINDER_TOLERANCE

    cuts: list[Point] = [start]
    for step in range(1, count + 1):
        if step == count and not has_remainder:
            # last full piece lands on the original end point
            cuts.append(end)
        else:
            cuts.append(_interpolate(start, end, step * max_length / edge_length))
    if has_remainder:
        cuts.append(end)

    return [LineString((a, b)) for a, b in pairwise(cuts)]


def segmentize_line(line: LineString, max_length: float) -> list[LineString]:
    """Return the output lines for a single input line (see module docstring)."""
    edges = list(pairwise(line))
    lengths = [distance(a, b) for a, b in edges]
    if all(edge_length <= max_length for edge_length in lengths):
        return [line]

    result: list[LineString] = []
    for (start, end), edge_length in zip(edges, lengths):
        if edge_length <= max_length:
            result.append(LineString((start, end)))
        else:
            result.extend(_split_edge(start, end, edge_length, max_length))
    return result


def _check_max_length(max_length: float) -> None:
    if isinstance(max_length, bool) or not isinstance(max_length, (int, float)):
        raise InvalidArgumentError(
            f"max_length must be a number, got {type(max_length).__name__}",
            {"max_length": repr(max_length)},
        )
    if not math.isfinite(max_length) or max_length <= 0:
        raise InvalidArgumentError(
            f"max_length must be a finite number greater than zero, got {max_length}",
            {"max_length": repr(max_length)},
        )


def segmentize(geom: Geometry, max_length: float) -> Geometry:
    """Split the lines of ``geom`` so that no edge is longer than ``max_length``.

    Args:
        geom: LineString or MultiLineString geometry. Any other variant gives
            an empty MultiLineString.
        max_length: Maximum edge length, in coordinate units. Must be > 0.

    Returns:
        New MultiLineString geometry with the input's SRID.

    Raises:
        InvalidArgumentError: If max_length is not a finite positive number.
    """
    _check_max_length(max_length)

    value = geom.value
    lines: Sequence[LineString]
    if isinstance(value, LineString):
        lines = (value,)
    elif isinstance(value, MultiLineString):
        lines = value.geoms
    else:
        logger.debug("segmentize: {} input has no lines", type(value).__name__)
        lines = ()

    output: list[LineString] = []
    for line in lines:
        parts = segmentize_line(line, max_length)
        if len(parts) > 1:
            logger.debug(
                "segmentize: line of {} points split into {} parts (max_length={})",
                len(line),
                len(parts),
                max_length,
            )
        output.extend(parts)

    return Geometry(MultiLineString(output), srid=geom.srid)


__all__ = ["segmentize", "segmentize_line"]
