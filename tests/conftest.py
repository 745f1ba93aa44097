"""
Shared test fixtures for the geometry test suite.

Provides synthetic GeoJSON geometry values (the RFC 7946 appendix examples
and a few edge cases) so that tests do not need any data files.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so the package imports without installing
PROJECT_DIR = Path(__file__).parent.parent
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))


# ---------------------------------------------------------------------------
# Ring coordinate fixtures ([lon, lat] pairs)
# ---------------------------------------------------------------------------

@pytest.fixture
def square_ring_coords():
    """Counterclockwise unit square at (100, 0)."""
    return [
        [100.0, 0.0],
        [101.0, 0.0],
        [101.0, 1.0],
        [100.0, 1.0],
        [100.0, 0.0],
    ]


@pytest.fixture
def hole_ring_coords():
    """Clockwise hole fully inside square_ring_coords."""
    return [
        [100.8, 0.8],
        [100.8, 0.2],
        [100.2, 0.2],
        [100.2, 0.8],
        [100.8, 0.8],
    ]


@pytest.fixture
def crossing_ring_coords():
    """Ring straddling the east edge of square_ring_coords."""
    return [
        [100.5, 0.2],
        [101.5, 0.2],
        [101.5, 0.8],
        [100.5, 0.8],
        [100.5, 0.2],
    ]


@pytest.fixture
def outside_ring_coords():
    """Ring entirely east of square_ring_coords."""
    return [
        [102.0, 0.2],
        [102.5, 0.2],
        [102.5, 0.8],
        [102.0, 0.8],
        [102.0, 0.2],
    ]


# ---------------------------------------------------------------------------
# GeoJSON geometry fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def point_json():
    return {"type": "Point", "coordinates": [100.0, 0.0]}


@pytest.fixture
def line_string_json():
    return {"type": "LineString", "coordinates": [[100.0, 0.0], [101.0, 1.0]]}


@pytest.fixture
def polygon_json(square_ring_coords):
    return {"type": "Polygon", "coordinates": [square_ring_coords]}


@pytest.fixture
def polygon_with_hole_json(square_ring_coords, hole_ring_coords):
    return {"type": "Polygon", "coordinates": [square_ring_coords, hole_ring_coords]}


@pytest.fixture
def all_geometry_json(square_ring_coords, hole_ring_coords):
    """One example of every geometry type, RFC 7946 appendix A style."""
    return [
        {"type": "Point", "coordinates": [100.0, 0.0, 12.5]},
        {"type": "MultiPoint", "coordinates": [[100.0, 0.0], [101.0, 1.0]]},
        {"type": "MultiPoint", "coordinates": []},
        {"type": "LineString", "coordinates": [[100.0, 0.0], [101.0, 1.0]]},
        {
            "type": "LineString",
            "coordinates": [[101.0, 0.0], [102.0, 1.0], [101.0, 1.0], [101.0, 0.0]],
        },
        {
            "type": "MultiLineString",
            "coordinates": [
                [[100.0, 0.0], [101.0, 1.0]],
                [[102.0, 2.0], [103.0, 3.0]],
            ],
        },
        {"type": "Polygon", "coordinates": [square_ring_coords]},
        {"type": "Polygon", "coordinates": [square_ring_coords, hole_ring_coords]},
        {
            "type": "MultiPolygon",
            "coordinates": [
                [
                    [[102.0, 2.0], [103.0, 2.0], [103.0, 3.0], [102.0, 3.0], [102.0, 2.0]],
                ],
                [square_ring_coords, hole_ring_coords],
            ],
        },
        {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Point", "coordinates": [100.0, 0.0]},
                {"type": "LineString", "coordinates": [[101.0, 0.0], [102.0, 1.0]]},
                {
                    "type": "GeometryCollection",
                    "geometries": [{"type": "Point", "coordinates": [1.0, 2.0]}],
                },
            ],
        },
    ]
