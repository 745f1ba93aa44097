"""
GeoJSON geometry model and codec.

Provides immutable, validated geometry objects for the seven RFC 7946
geometry types and a codec to and from parsed JSON values:

    from geojson_geometry import decode_geometry, encode_geometry

    point = decode_geometry({"type": "Point", "coordinates": [100.0, 0.0]})
    encode_geometry(point)  # {"type": "Point", "coordinates": [100.0, 0.0]}
"""

import logging

from geojson_geometry.position import Position
from geojson_geometry.coordinates import (
    PointCoordinates, MultiPointCoordinates,
    LineStringCoordinates, StandardLineString, LinearRing,
    MultiLineStringCoordinates, PolygonCoordinates, MultiPolygonCoordinates,
)
from geojson_geometry.geometry import (
    GeometryType, Geometry,
    Point, MultiPoint, LineString, MultiLineString,
    Polygon, MultiPolygon, GeometryCollection,
)
from geojson_geometry.codec import decode_geometry, encode_geometry
from geojson_geometry.errors import (
    GeoJsonError, InvalidPositionShape,
    InvalidLineString, DegenerateLineString,
    InvalidLinearRing, DegenerateRing,
    InvalidMultiLineString, InvalidPolygon, HoleNotContained, InvalidMultiPolygon,
    DecodeError, UnknownGeometryType, MissingField,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Position",
    "PointCoordinates", "MultiPointCoordinates",
    "LineStringCoordinates", "StandardLineString", "LinearRing",
    "MultiLineStringCoordinates", "PolygonCoordinates", "MultiPolygonCoordinates",
    "GeometryType", "Geometry",
    "Point", "MultiPoint", "LineString", "MultiLineString",
    "Polygon", "MultiPolygon", "GeometryCollection",
    "decode_geometry", "encode_geometry",
    "GeoJsonError", "InvalidPositionShape",
    "InvalidLineString", "DegenerateLineString",
    "InvalidLinearRing", "DegenerateRing",
    "InvalidMultiLineString", "InvalidPolygon", "HoleNotContained", "InvalidMultiPolygon",
    "DecodeError", "UnknownGeometryType", "MissingField",
]
