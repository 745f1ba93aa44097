"""
Coordinate containers, one per geometry kind.

Each container validates its own invariants at construction and carries the
``to_json`` / ``from_json`` pair for its nested-array wire shape:

- Point: a single position
- MultiPoint / LineString: an array of positions
- MultiLineString / Polygon: an array of line string coordinate arrays
- MultiPolygon: an array of Polygon coordinate arrays

A line string is either a ``StandardLineString`` or a ``LinearRing``. Which
one is derived from the positions: a closed sequence of four or more
positions is always a ``LinearRing``, because polygons are built from rings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Sequence, Union

from geojson_geometry import rings as ring_algorithms
from geojson_geometry.config import MIN_LINE_STRING_POSITIONS, MIN_LINEAR_RING_POSITIONS
from geojson_geometry.errors import (
    DecodeError,
    DegenerateLineString,
    HoleNotContained,
    InvalidLineString,
    InvalidLinearRing,
    InvalidMultiLineString,
    InvalidMultiPolygon,
    InvalidPolygon,
    InvalidPositionShape,
)
from geojson_geometry.position import Position

logger = logging.getLogger(__name__)


def _json_array(value: Any, what: str) -> Sequence[Any]:
    """Accept a list or tuple as a JSON array; reject everything else."""
    if not isinstance(value, (list, tuple)):
        raise DecodeError(f"{what} must be an array, got {type(value).__name__}")
    return value


def _positions(values: Iterable[Any], error: type[Exception], what: str) -> tuple[Position, ...]:
    positions = tuple(values)
    for index, position in enumerate(positions):
        if not isinstance(position, Position):
            raise error(f"{what} element {index} is not a Position: {position!r}")
    return positions


# ---------------------------------------------------------------------------
# Point / MultiPoint
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PointCoordinates:
    """For type "Point", the coordinates member is a single position."""

    position: Position

    def __post_init__(self):
        if not isinstance(self.position, Position):
            raise InvalidPositionShape(f"Point requires a Position, got {self.position!r}")

    def to_json(self) -> list[float]:
        return self.position.to_json()

    @classmethod
    def from_json(cls, value: Any) -> "PointCoordinates":
        return cls(Position.from_json(_json_array(value, "Point coordinates")))


@dataclass(frozen=True)
class MultiPointCoordinates:
    """For type "MultiPoint", the coordinates member is an array of positions."""

    positions: tuple[Position, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "positions", _positions(self.positions, InvalidPositionShape, "MultiPoint")
        )

    def to_json(self) -> list[list[float]]:
        return [p.to_json() for p in self.positions]

    @classmethod
    def from_json(cls, value: Any) -> "MultiPointCoordinates":
        return cls(tuple(
            Position.from_json(_json_array(item, "Position"))
            for item in _json_array(value, "MultiPoint coordinates")
        ))


# ---------------------------------------------------------------------------
# LineString variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LineStringCoordinates:
    """
    Positions of a line string. Use ``from_positions`` to build one.

    Concrete instances are always ``StandardLineString`` or ``LinearRing``.
    """

    positions: tuple[Position, ...]

    is_ring: ClassVar[bool] = False

    def __post_init__(self):
        if type(self) is LineStringCoordinates:
            raise TypeError("Use LineStringCoordinates.from_positions() to build a line string")
        object.__setattr__(
            self, "positions", _positions(self.positions, InvalidLineString, "LineString")
        )

    @classmethod
    def from_positions(cls, positions: Iterable[Position]) -> "LineStringCoordinates":
        """
        Classify positions as a ``LinearRing`` or a ``StandardLineString``.

        A ring is tried first; if the positions are not a ring the standard
        variant is built, and its error (if any) is what propagates.

        Raises:
            DegenerateLineString: If fewer than two positions are given
            InvalidLineString: If an element is not a Position
        """
        positions = tuple(positions)
        try:
            return LinearRing(positions)
        except InvalidLinearRing:
            return StandardLineString(positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    def __getitem__(self, index):
        return self.positions[index]

    def to_json(self) -> list[list[float]]:
        return [p.to_json() for p in self.positions]

    @classmethod
    def from_json(cls, value: Any) -> "LineStringCoordinates":
        positions = tuple(
            Position.from_json(_json_array(item, "Position"))
            for item in _json_array(value, "LineString coordinates")
        )
        if cls is LineStringCoordinates:
            return cls.from_positions(positions)
        return cls(positions)


@dataclass(frozen=True)
class StandardLineString(LineStringCoordinates):
    """An open (or too short to be a ring) line of two or more positions."""

    def __post_init__(self):
        super().__post_init__()
        if len(self.positions) < MIN_LINE_STRING_POSITIONS:
            raise DegenerateLineString(
                f'For type "LineString", the "coordinates" member is an array of '
                f"{MIN_LINE_STRING_POSITIONS} or more positions, got {len(self.positions)}"
            )
        if ring_algorithms.is_linear_ring(self.positions):
            raise InvalidLineString("Closed line strings of 4+ positions are linear rings")


@dataclass(frozen=True)
class LinearRing(LineStringCoordinates):
    """
    A closed line string with four or more positions.

    The first and last positions are equivalent and contain identical values.
    A linear ring is the boundary of a surface or of a hole in a surface.
    """

    is_ring: ClassVar[bool] = True

    def __post_init__(self):
        super().__post_init__()
        if len(self.positions) < MIN_LINEAR_RING_POSITIONS:
            raise InvalidLinearRing(
                f"Linear rings must have at least {MIN_LINEAR_RING_POSITIONS} positions, "
                f"got {len(self.positions)}"
            )
        if not ring_algorithms.is_closed(self.positions):
            raise InvalidLinearRing("Linear rings must have the first position match the last")

    @property
    def is_clockwise(self) -> bool:
        """Winding direction; raises DegenerateRing for repeated vertices."""
        return ring_algorithms.is_clockwise(self.positions)

    @property
    def signed_area(self) -> float:
        return ring_algorithms.signed_area(self.positions)

    def contains(self, other: "LinearRing") -> bool:
        """True if ``other`` lies inside this ring without touching it."""
        return ring_algorithms.contains(self.positions, other.positions)


# ---------------------------------------------------------------------------
# MultiLineString
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MultiLineStringCoordinates:
    """For type "MultiLineString", an array of LineString coordinate arrays."""

    line_strings: tuple[LineStringCoordinates, ...] = ()

    def __post_init__(self):
        line_strings = tuple(self.line_strings)
        for index, line in enumerate(line_strings):
            if not isinstance(line, LineStringCoordinates):
                raise InvalidMultiLineString(f"MultiLineString element {index} is not a line string")
        object.__setattr__(self, "line_strings", line_strings)

    def to_json(self) -> list[list[list[float]]]:
        return [line.to_json() for line in self.line_strings]

    @classmethod
    def from_json(cls, value: Any) -> "MultiLineStringCoordinates":
        return cls(tuple(
            LineStringCoordinates.from_json(item)
            for item in _json_array(value, "MultiLineString coordinates")
        ))


# ---------------------------------------------------------------------------
# Polygon / MultiPolygon
# ---------------------------------------------------------------------------

def _as_ring(ring: Any, index: int) -> LinearRing:
    if isinstance(ring, LinearRing):
        return ring
    if isinstance(ring, LineStringCoordinates):
        raise InvalidPolygon(f"Polygon ring {index} is not a linear ring")
    return LinearRing(tuple(ring))


@dataclass(frozen=True)
class PolygonCoordinates:
    """
    For type "Polygon", an array of linear ring coordinate arrays.

    The first ring is the exterior ring; any others are interior rings
    (holes) and must lie inside the exterior ring. Rings may be given as
    ``LinearRing`` instances or as sequences of positions.
    """

    rings: tuple[LinearRing, ...]

    def __post_init__(self):
        linear_rings = tuple(_as_ring(ring, i) for i, ring in enumerate(self.rings))
        if not linear_rings:
            raise InvalidPolygon("Polygon must contain at least one linear ring")

        exterior = linear_rings[0]
        for index, hole in enumerate(linear_rings[1:], start=1):
            if not exterior.contains(hole):
                logger.debug(f"Polygon rejected: interior ring {index} of {len(linear_rings)} escapes exterior")
                raise HoleNotContained(index)

        object.__setattr__(self, "rings", linear_rings)

    @property
    def exterior(self) -> LinearRing:
        return self.rings[0]

    @property
    def holes(self) -> tuple[LinearRing, ...]:
        return self.rings[1:]

    def follows_right_hand_rule(self) -> bool:
        """Exterior ring counterclockwise, holes clockwise (RFC 7946 3.1.6)."""
        if self.exterior.is_clockwise:
            return False
        return all(hole.is_clockwise for hole in self.holes)

    def to_json(self) -> list[list[list[float]]]:
        return [ring.to_json() for ring in self.rings]

    @classmethod
    def from_json(cls, value: Any) -> "PolygonCoordinates":
        return cls(tuple(
            LinearRing.from_json(item)
            for item in _json_array(value, "Polygon coordinates")
        ))


@dataclass(frozen=True)
class MultiPolygonCoordinates:
    """For type "MultiPolygon", an array of Polygon coordinate arrays."""

    polygons: tuple[PolygonCoordinates, ...] = ()

    def __post_init__(self):
        polygons = tuple(self.polygons)
        for index, polygon in enumerate(polygons):
            if not isinstance(polygon, PolygonCoordinates):
                raise InvalidMultiPolygon(f"MultiPolygon element {index} is not a polygon")
        object.__setattr__(self, "polygons", polygons)

    def follows_right_hand_rule(self) -> bool:
        return all(polygon.follows_right_hand_rule() for polygon in self.polygons)

    def to_json(self) -> list[list[list[list[float]]]]:
        return [polygon.to_json() for polygon in self.polygons]

    @classmethod
    def from_json(cls, value: Any) -> "MultiPolygonCoordinates":
        return cls(tuple(
            PolygonCoordinates.from_json(item)
            for item in _json_array(value, "MultiPolygon coordinates")
        ))


Coordinates = Union[
    PointCoordinates,
    MultiPointCoordinates,
    LineStringCoordinates,
    MultiLineStringCoordinates,
    PolygonCoordinates,
    MultiPolygonCoordinates,
]
