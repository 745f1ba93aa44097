"""
Exception taxonomy for geometry construction and decoding.

Every error is a local validation failure raised synchronously by the
constructor or decoder that detected it. All of them derive from
``GeoJsonError`` (itself a ``ValueError``) so callers can catch a single type.
"""

from __future__ import annotations

from typing import Optional


class GeoJsonError(ValueError):
    """Base class for every geometry validation or decoding failure."""


class InvalidPositionShape(GeoJsonError):
    """A position has the wrong number of components or a non-numeric one."""


class InvalidLineString(GeoJsonError):
    """A line string was built from something other than positions."""


class DegenerateLineString(InvalidLineString):
    """A non-ring line string has fewer than two positions."""


class InvalidLinearRing(GeoJsonError):
    """A linear ring has fewer than four positions or is not closed."""


class DegenerateRing(GeoJsonError):
    """A ring has coincident vertices, so its winding cannot be determined."""


class InvalidMultiLineString(GeoJsonError):
    """A multi line string member is not a line string."""


class InvalidPolygon(GeoJsonError):
    """A polygon has no rings or a member that is not a linear ring."""


class HoleNotContained(InvalidPolygon):
    """An interior ring of a polygon is not inside its exterior ring."""

    def __init__(self, index: int):
        super().__init__(f"Interior ring {index} is not contained in the exterior ring")
        self.index = index


class InvalidMultiPolygon(GeoJsonError):
    """A multi polygon member is not a polygon."""


class DecodeError(GeoJsonError):
    """A wire value could not be decoded into a geometry object."""

    def __init__(self, message: str, geometry_type: Optional[str] = None):
        super().__init__(message)
        self.geometry_type = geometry_type


class UnknownGeometryType(DecodeError):
    """The ``"type"`` member names no geometry type."""

    def __init__(self, geometry_type: object):
        super().__init__(f"Unknown geometry type: {geometry_type!r}", geometry_type=str(geometry_type))


class MissingField(DecodeError):
    """A required member is absent from a geometry object."""

    def __init__(self, field: str, geometry_type: Optional[str] = None):
        where = f" in {geometry_type}" if geometry_type else ""
        super().__init__(f"Missing required member {field!r}{where}", geometry_type=geometry_type)
        self.field = field
