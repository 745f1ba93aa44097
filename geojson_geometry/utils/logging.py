"""Logging setup for applications that embed the library."""

from __future__ import annotations

import logging

from geojson_geometry.config import LOG_FORMAT


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure root logging with the library's format.

    The library itself only attaches a NullHandler; call this from an
    application entry point to see its log records.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("geojson_geometry").setLevel(level)
