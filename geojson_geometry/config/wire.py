"""Member names of GeoJSON geometry objects on the wire."""

TYPE_KEY = "type"
COORDINATES_KEY = "coordinates"
GEOMETRIES_KEY = "geometries"
