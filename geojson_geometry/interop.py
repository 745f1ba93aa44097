"""
Conversion between geometry objects and shapely geometries.

Goes through the GeoJSON mapping protocol on both sides, so everything the
codec validates is validated here too.
"""

from __future__ import annotations

import logging

from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry

from geojson_geometry.codec import decode_geometry, encode_geometry
from geojson_geometry.geometry import Geometry

logger = logging.getLogger(__name__)


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """Build the equivalent shapely geometry."""
    return shape(encode_geometry(geometry))


def from_shapely(geometry: BaseGeometry) -> Geometry:
    """
    Build a geometry object from a shapely geometry.

    Raises:
        DecodeError: If shapely produces coordinates this model rejects,
            e.g. an empty Point or a polygon hole touching its shell
    """
    logger.debug(f"Converting shapely {geometry.geom_type}")
    return decode_geometry(mapping(geometry))
