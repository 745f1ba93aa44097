"""
Ring geometry algorithms.

Closure/size classification, winding direction, and ring-in-ring containment
for linear rings. Every computation is planar: longitude is x and latitude is
y, and edges are straight Cartesian segments (RFC 7946 section 3.1.1).

Rings are assumed to be simple. Full self-intersection detection is not
attempted here; the containment test only answers whether a simple ring lies
inside another simple ring.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from geojson_geometry.config import MIN_LINEAR_RING_POSITIONS, SEGMENT_EPSILON
from geojson_geometry.errors import DegenerateRing, InvalidLinearRing
from geojson_geometry.position import Position

logger = logging.getLogger(__name__)

Vector = tuple[float, float]


def is_closed(positions: Sequence[Position]) -> bool:
    """True if the first and last positions are equal by value."""
    return len(positions) > 0 and positions[0] == positions[-1]


def is_linear_ring(positions: Sequence[Position]) -> bool:
    """True if the positions form a closed ring of four or more positions."""
    return len(positions) >= MIN_LINEAR_RING_POSITIONS and is_closed(positions)


def _require_ring(positions: Sequence[Position]) -> None:
    if not is_linear_ring(positions):
        raise InvalidLinearRing(
            f"Expected a closed ring of at least {MIN_LINEAR_RING_POSITIONS} positions"
        )


def _as_array(positions: Sequence[Position]) -> np.ndarray:
    """Nx2 float array of (longitude, latitude) rows."""
    return np.asarray([p.xy for p in positions], dtype=float).reshape(-1, 2)


def _cross(a: Vector, b: Vector) -> float:
    return a[0] * b[1] - a[1] * b[0]


def _dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _sub(a: Vector, b: Vector) -> Vector:
    return (a[0] - b[0], a[1] - b[1])


# ---------------------------------------------------------------------------
# Winding direction
# ---------------------------------------------------------------------------

def is_clockwise(positions: Sequence[Position]) -> bool:
    """
    Determine the winding direction of a linear ring.

    Finds the extremal vertex (minimum latitude, ties broken by maximum
    longitude), which is always convex, and reads the ring orientation from
    the turn made there: the cross product of the incoming and outgoing edge
    vectors is negative for a clockwise ring. Only that one vertex and its
    two neighbours are inspected, so the result is meaningless for
    self-intersecting rings.

    Args:
        positions: A closed ring (first position repeated at the end)

    Returns:
        True if the ring is clockwise, False if counterclockwise

    Raises:
        InvalidLinearRing: If positions is not a closed ring of 4+ positions
        DegenerateRing: If the ring repeats a vertex, or the turn at the
            extremal vertex has no direction
    """
    _require_ring(positions)

    # Drop the closing duplicate
    vertices = [p.xy for p in positions[:-1]]
    if len(set(vertices)) != len(vertices):
        raise DegenerateRing("Cannot determine winding: ring has two equal vertices")

    count = len(vertices)
    index = min(range(count), key=lambda i: (vertices[i][1], -vertices[i][0]))

    a = vertices[index - 1]
    b = vertices[index]
    c = vertices[(index + 1) % count]
    turn = _cross(_sub(b, a), _sub(c, b))
    if turn == 0.0:
        raise DegenerateRing(f"Cannot determine winding: ring folds back at vertex {index}")
    return turn < 0.0


def signed_area(positions: Sequence[Position]) -> float:
    """
    Shoelace area of a closed ring in squared degrees.

    Positive for counterclockwise rings, negative for clockwise ones.
    """
    _require_ring(positions)
    xy = _as_array(positions)
    x, y = xy[:, 0], xy[:, 1]
    return 0.5 * float(np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


# ---------------------------------------------------------------------------
# Segment intersection
# ---------------------------------------------------------------------------

def segments_intersect(
    p: Vector,
    r: Vector,
    q: Vector,
    s: Vector,
    epsilon: float = SEGMENT_EPSILON,
) -> bool:
    """
    Test whether segments ``p + t*r`` and ``q + u*s`` (t, u in [0, 1]) meet.

    Uses the parametric cross-product formulation. When ``r x s`` is within
    ``epsilon * |r| * |s|`` of zero the segments are parallel; collinear ones
    are projected onto ``r`` and intersect iff the 1-D intervals overlap.
    Touching at an endpoint counts as intersecting.

    Both tolerances are relative to the operand lengths, so the result does
    not change when every coordinate is scaled by the same factor.
    """
    r_cross_s = _cross(r, s)
    q_minus_p = _sub(q, p)
    q_minus_p_cross_r = _cross(q_minus_p, r)

    if abs(r_cross_s) <= epsilon * math.sqrt(_dot(r, r) * _dot(s, s)):
        if abs(q_minus_p_cross_r) > epsilon * math.sqrt(_dot(q_minus_p, q_minus_p) * _dot(r, r)):
            return False  # parallel, never meet

        r_dot_r = _dot(r, r)
        if r_dot_r == 0.0:
            # p is a zero-length segment: swap so the projection axis is s
            if _dot(s, s) == 0.0:
                return p == q
            return segments_intersect(q, s, p, r, epsilon)

        t0 = _dot(q_minus_p, r) / r_dot_r
        t1 = t0 + _dot(s, r) / r_dot_r
        return max(t0, t1) >= 0.0 and min(t0, t1) <= 1.0

    t = _cross(q_minus_p, s) / r_cross_s
    u = q_minus_p_cross_r / r_cross_s
    return 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0


def _edges(positions: Sequence[Position]) -> tuple[np.ndarray, np.ndarray]:
    """Split a closed ring into (origin, direction) rows, one per edge."""
    xy = _as_array(positions)
    return xy[:-1], np.diff(xy, axis=0)


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------

def point_in_ring(position: Position, ring: Sequence[Position]) -> bool:
    """
    Even-odd ray casting test of a position against a closed ring.

    Points exactly on the boundary may land on either side.
    """
    xy = _as_array(ring)
    x1, y1 = xy[:-1, 0], xy[:-1, 1]
    x2, y2 = xy[1:, 0], xy[1:, 1]
    lon, lat = position.xy

    straddles = (y1 > lat) != (y2 > lat)
    # Horizontal edges never straddle, so their nan/inf results are masked out
    with np.errstate(divide="ignore", invalid="ignore"):
        x_at_lat = (x2 - x1) * (lat - y1) / (y2 - y1) + x1
    hits = straddles & (lon < x_at_lat)
    return bool(np.count_nonzero(hits) % 2)


def contains(
    outer: Sequence[Position],
    inner: Sequence[Position],
    epsilon: float = SEGMENT_EPSILON,
) -> bool:
    """
    Check that ring ``inner`` lies strictly inside ring ``outer``.

    Every pair of edges (one per ring) whose x-extents overlap is tested for
    intersection; any shared boundary point disqualifies the pair of rings.
    With no boundary contact, the inner ring is either wholly inside or
    wholly outside, which a single ray cast from its first vertex decides.

    Both rings must be simple; this is not a self-intersection check.

    Raises:
        InvalidLinearRing: If either argument is not a closed ring of 4+ positions
    """
    _require_ring(outer)
    _require_ring(inner)

    outer_origins, outer_dirs = _edges(outer)
    inner_origins, inner_dirs = _edges(inner)

    outer_min = np.minimum(outer_origins[:, 0], outer_origins[:, 0] + outer_dirs[:, 0])
    outer_max = np.maximum(outer_origins[:, 0], outer_origins[:, 0] + outer_dirs[:, 0])
    inner_min = np.minimum(inner_origins[:, 0], inner_origins[:, 0] + inner_dirs[:, 0])
    inner_max = np.maximum(inner_origins[:, 0], inner_origins[:, 0] + inner_dirs[:, 0])

    span = max(outer_max.max(), inner_max.max()) - min(outer_min.min(), inner_min.min())
    slack = epsilon * float(span)
    overlapping = (outer_min[:, None] <= inner_max[None, :] + slack) & (
        inner_min[None, :] <= outer_max[:, None] + slack
    )

    for outer_index, inner_index in np.argwhere(overlapping):
        p = tuple(outer_origins[outer_index].tolist())
        r = tuple(outer_dirs[outer_index].tolist())
        q = tuple(inner_origins[inner_index].tolist())
        s = tuple(inner_dirs[inner_index].tolist())
        if segments_intersect(p, r, q, s, epsilon):
            logger.debug(
                f"Ring edge {inner_index} meets exterior edge {outer_index}; not contained"
            )
            return False

    return point_in_ring(inner[0], outer)
