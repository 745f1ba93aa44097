"""
Geometry construction helpers.

Common patterns when assembling geometries from loose coordinate data:
ring closing and choosing between a Polygon and a MultiPolygon.
"""

from __future__ import annotations

from typing import Sequence, Union

from geojson_geometry.coordinates import LinearRing, MultiPolygonCoordinates, PolygonCoordinates
from geojson_geometry.geometry import MultiPolygon, Polygon
from geojson_geometry.position import Position


def close_ring(positions: Sequence[Position]) -> list[Position]:
    """
    Ensure a position sequence is closed (first position == last position).

    Returns a new list; if the input is open, the first position is appended.
    Empty input stays empty.
    """
    closed = list(positions)
    if closed and closed[0] != closed[-1]:
        closed.append(closed[0])
    return closed


def make_polygon_or_multi(
    rings: Sequence[Sequence[Position]],
) -> Union[Polygon, MultiPolygon]:
    """
    Construct a Polygon or MultiPolygon from exterior rings.

    Each ring is closed first and becomes the exterior of its own polygon.

    Args:
        rings: One or more exterior rings as position sequences

    Returns:
        A Polygon for a single ring, otherwise a MultiPolygon

    Raises:
        ValueError: If no rings are given
        InvalidLinearRing: If a ring has fewer than 3 distinct positions
    """
    if not rings:
        raise ValueError("At least one ring is required")

    polygons = [PolygonCoordinates((LinearRing(tuple(close_ring(ring))),)) for ring in rings]
    if len(polygons) == 1:
        return Polygon(polygons[0])
    return MultiPolygon(MultiPolygonCoordinates(tuple(polygons)))
