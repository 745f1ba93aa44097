"""Helpers built on top of the geometry model."""
