"""
Geometry objects: the seven RFC 7946 geometry types.

Every non-collection geometry wraps exactly one coordinate container of the
matching shape. The ``type`` tag is a class attribute, so it always agrees
with the container and cannot be set on an instance; it only exists to
reproduce the redundant ``"type"`` member of the wire format.

Equality and hashing are structural (tag + coordinates).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator

from geojson_geometry.coordinates import (
    LineStringCoordinates,
    MultiLineStringCoordinates,
    MultiPointCoordinates,
    MultiPolygonCoordinates,
    PointCoordinates,
    PolygonCoordinates,
)
from geojson_geometry.errors import UnknownGeometryType


class GeometryType(str, Enum):
    """The seven case-sensitive geometry type names."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    @classmethod
    def parse(cls, name: object) -> "GeometryType":
        """Look up a type by its wire name; raises UnknownGeometryType."""
        try:
            return cls(name)
        except ValueError:
            raise UnknownGeometryType(name) from None

    def __str__(self) -> str:
        return self.value


class Geometry:
    """Base of all geometry objects."""

    type: ClassVar[GeometryType]

    __slots__ = ()


def _check_container(geometry: Geometry, coordinates: object, expected: type) -> None:
    if not isinstance(coordinates, expected):
        raise TypeError(
            f"{geometry.type.value} requires {expected.__name__}, "
            f"got {type(coordinates).__name__}"
        )


@dataclass(frozen=True)
class Point(Geometry):
    coordinates: PointCoordinates

    type: ClassVar[GeometryType] = GeometryType.POINT

    def __post_init__(self):
        _check_container(self, self.coordinates, PointCoordinates)


@dataclass(frozen=True)
class MultiPoint(Geometry):
    coordinates: MultiPointCoordinates

    type: ClassVar[GeometryType] = GeometryType.MULTI_POINT

    def __post_init__(self):
        _check_container(self, self.coordinates, MultiPointCoordinates)


@dataclass(frozen=True)
class LineString(Geometry):
    """Wraps either line string variant (standard or linear ring)."""

    coordinates: LineStringCoordinates

    type: ClassVar[GeometryType] = GeometryType.LINE_STRING

    def __post_init__(self):
        _check_container(self, self.coordinates, LineStringCoordinates)


@dataclass(frozen=True)
class MultiLineString(Geometry):
    coordinates: MultiLineStringCoordinates

    type: ClassVar[GeometryType] = GeometryType.MULTI_LINE_STRING

    def __post_init__(self):
        _check_container(self, self.coordinates, MultiLineStringCoordinates)


@dataclass(frozen=True)
class Polygon(Geometry):
    coordinates: PolygonCoordinates

    type: ClassVar[GeometryType] = GeometryType.POLYGON

    def __post_init__(self):
        _check_container(self, self.coordinates, PolygonCoordinates)

    def follows_right_hand_rule(self) -> bool:
        """
        Whether the exterior ring is counterclockwise and holes clockwise.

        Informational only: polygons breaking the rule are still valid.
        """
        return self.coordinates.follows_right_hand_rule()


@dataclass(frozen=True)
class MultiPolygon(Geometry):
    coordinates: MultiPolygonCoordinates

    type: ClassVar[GeometryType] = GeometryType.MULTI_POLYGON

    def __post_init__(self):
        _check_container(self, self.coordinates, MultiPolygonCoordinates)

    def follows_right_hand_rule(self) -> bool:
        return self.coordinates.follows_right_hand_rule()


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """
    An ordered collection of geometry objects, possibly nested collections.

    Members are not validated beyond being geometry objects themselves,
    which were validated when they were built.
    """

    geometries: tuple[Geometry, ...] = ()

    type: ClassVar[GeometryType] = GeometryType.GEOMETRY_COLLECTION

    def __post_init__(self):
        geometries = tuple(self.geometries)
        for index, geometry in enumerate(geometries):
            if not isinstance(geometry, Geometry):
                raise TypeError(f"GeometryCollection member {index} is not a geometry: {geometry!r}")
        object.__setattr__(self, "geometries", geometries)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.geometries)

    def __len__(self) -> int:
        return len(self.geometries)


GEOMETRY_CLASSES: dict[GeometryType, type] = {
    cls.type: cls
    for cls in (Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection)
}
