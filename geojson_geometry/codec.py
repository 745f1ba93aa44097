"""
Geometry codec: generic JSON values <-> geometry objects.

Consumes and produces already-parsed JSON values (dicts, lists, numbers,
strings). Turning text into those values is left to the caller's JSON
parser.

Wire shapes:
    {"type": "Point", "coordinates": [lon, lat]}
    {"type": "LineString", "coordinates": [[lon, lat], ...]}
    {"type": "GeometryCollection", "geometries": [<geometry>, ...]}

Members other than ``type``, ``coordinates`` and ``geometries`` (``bbox``,
foreign members) are ignored on decode and never emitted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from geojson_geometry.config import COORDINATES_KEY, GEOMETRIES_KEY, TYPE_KEY
from geojson_geometry.coordinates import (
    LineStringCoordinates,
    MultiLineStringCoordinates,
    MultiPointCoordinates,
    MultiPolygonCoordinates,
    PointCoordinates,
    PolygonCoordinates,
)
from geojson_geometry.errors import DecodeError, GeoJsonError, MissingField
from geojson_geometry.geometry import (
    GEOMETRY_CLASSES,
    Geometry,
    GeometryCollection,
    GeometryType,
)

logger = logging.getLogger(__name__)

# Coordinate container decoder per non-collection geometry type
_COORDINATE_DECODERS = {
    GeometryType.POINT: PointCoordinates.from_json,
    GeometryType.MULTI_POINT: MultiPointCoordinates.from_json,
    GeometryType.LINE_STRING: LineStringCoordinates.from_json,
    GeometryType.MULTI_LINE_STRING: MultiLineStringCoordinates.from_json,
    GeometryType.POLYGON: PolygonCoordinates.from_json,
    GeometryType.MULTI_POLYGON: MultiPolygonCoordinates.from_json,
}


def decode_geometry(value: Any) -> Geometry:
    """
    Decode a parsed JSON value into a geometry object.

    Args:
        value: A JSON object (mapping) with a ``type`` member

    Returns:
        The geometry object matching ``value["type"]``

    Raises:
        MissingField: If ``type``, ``coordinates`` or ``geometries`` is absent
        UnknownGeometryType: If ``type`` is not one of the seven geometry types
        DecodeError: If the coordinates are malformed or fail validation; the
            validation error is chained as ``__cause__``
    """
    if not isinstance(value, Mapping):
        raise DecodeError(f"Geometry must be a JSON object, got {type(value).__name__}")
    if TYPE_KEY not in value:
        raise MissingField(TYPE_KEY)

    geometry_type = GeometryType.parse(value[TYPE_KEY])

    if geometry_type is GeometryType.GEOMETRY_COLLECTION:
        return _decode_collection(value)

    if COORDINATES_KEY not in value:
        raise MissingField(COORDINATES_KEY, geometry_type=geometry_type.value)

    decode_coordinates = _COORDINATE_DECODERS[geometry_type]
    try:
        coordinates = decode_coordinates(value[COORDINATES_KEY])
    except DecodeError as e:
        if e.geometry_type is None:
            e.geometry_type = geometry_type.value
        logger.debug(f"Malformed {geometry_type.value} coordinates: {e}")
        raise
    except GeoJsonError as e:
        logger.debug(f"Invalid {geometry_type.value} coordinates: {e}")
        raise DecodeError(
            f"Invalid {geometry_type.value}: {e}", geometry_type=geometry_type.value
        ) from e

    return GEOMETRY_CLASSES[geometry_type](coordinates)


def _decode_collection(value: Mapping) -> GeometryCollection:
    if GEOMETRIES_KEY not in value:
        raise MissingField(GEOMETRIES_KEY, geometry_type=GeometryType.GEOMETRY_COLLECTION.value)

    members = value[GEOMETRIES_KEY]
    if not isinstance(members, (list, tuple)):
        raise DecodeError(
            f"GeometryCollection geometries must be an array, got {type(members).__name__}",
            geometry_type=GeometryType.GEOMETRY_COLLECTION.value,
        )
    return GeometryCollection(tuple(decode_geometry(member) for member in members))


def encode_geometry(geometry: Geometry) -> dict[str, Any]:
    """
    Encode a geometry object as a JSON-ready dict.

    Every geometry carries its ``type``; collections carry ``geometries``
    and all others ``coordinates``.
    """
    if isinstance(geometry, GeometryCollection):
        return {
            TYPE_KEY: geometry.type.value,
            GEOMETRIES_KEY: [encode_geometry(member) for member in geometry.geometries],
        }
    if not isinstance(geometry, Geometry):
        raise TypeError(f"Cannot encode {type(geometry).__name__} as a geometry")
    return {
        TYPE_KEY: geometry.type.value,
        COORDINATES_KEY: geometry.coordinates.to_json(),
    }
