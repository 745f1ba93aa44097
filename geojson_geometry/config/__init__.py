"""
Library configuration package.

Re-exports all configuration values from sub-modules so that
``from geojson_geometry.config import X`` works for every constant.

Configuration is split into focused modules:
- geometry: SEGMENT_EPSILON, position component bounds, minimum sizes
- wire: TYPE_KEY, COORDINATES_KEY, GEOMETRIES_KEY
- logging: LOG_FORMAT
"""

# Geometry validation constants
from geojson_geometry.config.geometry import (
    SEGMENT_EPSILON,
    MIN_POSITION_COMPONENTS, MAX_POSITION_COMPONENTS, MAX_DECODED_POSITION_COMPONENTS,
    MIN_LINE_STRING_POSITIONS, MIN_LINEAR_RING_POSITIONS,
)

# Wire member names
from geojson_geometry.config.wire import TYPE_KEY, COORDINATES_KEY, GEOMETRIES_KEY

# Logging
from geojson_geometry.config.logging import LOG_FORMAT
