"""Tests for geojson_geometry/interop.py — shapely conversion."""

from __future__ import annotations

import pytest


class TestToShapely:
    """Test to_shapely()."""

    def test_point(self, point_json):
        from geojson_geometry.codec import decode_geometry
        from geojson_geometry.interop import to_shapely
        shp = to_shapely(decode_geometry(point_json))
        assert shp.geom_type == "Point"
        assert (shp.x, shp.y) == (100.0, 0.0)

    def test_polygon_with_hole_area(self, polygon_with_hole_json):
        from geojson_geometry.codec import decode_geometry
        from geojson_geometry.interop import to_shapely
        shp = to_shapely(decode_geometry(polygon_with_hole_json))
        assert shp.is_valid
        assert shp.area == pytest.approx(0.64)
        assert len(shp.interiors) == 1

    def test_every_geometry_type(self, all_geometry_json):
        from geojson_geometry.codec import decode_geometry
        from geojson_geometry.interop import to_shapely
        for value in all_geometry_json:
            assert to_shapely(decode_geometry(value)).geom_type == value["type"]


class TestFromShapely:
    """Test from_shapely()."""

    def test_polygon(self, square_ring_coords, hole_ring_coords):
        from shapely.geometry import Polygon as ShapelyPolygon
        from geojson_geometry.geometry import Polygon
        from geojson_geometry.interop import from_shapely
        geometry = from_shapely(ShapelyPolygon(square_ring_coords, [hole_ring_coords]))
        assert isinstance(geometry, Polygon)
        assert geometry.coordinates.exterior.is_clockwise is False
        assert geometry.coordinates.holes[0].is_clockwise is True

    def test_line_string(self):
        from shapely.geometry import LineString as ShapelyLineString
        from geojson_geometry.interop import from_shapely
        geometry = from_shapely(ShapelyLineString([(0, 0), (1, 1), (2, 0)]))
        assert not geometry.coordinates.is_ring
        assert len(geometry.coordinates) == 3

    def test_round_trip(self, all_geometry_json):
        from geojson_geometry.codec import decode_geometry
        from geojson_geometry.interop import from_shapely, to_shapely
        for value in all_geometry_json:
            geometry = decode_geometry(value)
            assert from_shapely(to_shapely(geometry)) == geometry

    def test_hole_outside_shell_rejected(self, square_ring_coords, outside_ring_coords):
        from shapely.geometry import Polygon as ShapelyPolygon
        from geojson_geometry.errors import DecodeError
        from geojson_geometry.interop import from_shapely
        invalid = ShapelyPolygon(square_ring_coords, [outside_ring_coords])
        with pytest.raises(DecodeError):
            from_shapely(invalid)
