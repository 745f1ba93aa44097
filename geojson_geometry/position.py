"""
Position: the atomic coordinate unit of every geometry.

A position is an array of numbers on the wire. The first two elements are
longitude and latitude, precisely in that order; altitude may follow as an
optional third element. RFC 7946 says parsers MAY ignore additional elements,
so a 4th component is accepted on decode and dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Real
from collections.abc import Sequence
from typing import Optional

from geojson_geometry.config import (
    MAX_DECODED_POSITION_COMPONENTS,
    MAX_POSITION_COMPONENTS,
    MIN_POSITION_COMPONENTS,
)
from geojson_geometry.errors import InvalidPositionShape

logger = logging.getLogger(__name__)


def _as_component(value: object, name: str) -> float:
    # bool is a Real subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidPositionShape(f"Position {name} must be a number, got {value!r}")
    try:
        return float(value)
    except OverflowError:
        raise InvalidPositionShape(f"Position {name} is out of floating point range") from None


@dataclass(frozen=True)
class Position:
    """
    Immutable (longitude, latitude[, altitude]) tuple.

    Components are stored as floats, so ``Position(100, 0)`` equals
    ``Position(100.0, 0.0)``.
    """

    longitude: float
    latitude: float
    altitude: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "longitude", _as_component(self.longitude, "longitude"))
        object.__setattr__(self, "latitude", _as_component(self.latitude, "latitude"))
        if self.altitude is not None:
            object.__setattr__(self, "altitude", _as_component(self.altitude, "altitude"))

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Position":
        """
        Build a position from 2-4 numeric components.

        Raises:
            InvalidPositionShape: If fewer than 2 or more than 4 components
                are given, or any component is not a number.
        """
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise InvalidPositionShape(f"Position must be an array of numbers, got {values!r}")

        count = len(values)
        if count < MIN_POSITION_COMPONENTS or count > MAX_DECODED_POSITION_COMPONENTS:
            raise InvalidPositionShape(
                f"Position must have {MIN_POSITION_COMPONENTS} to "
                f"{MAX_DECODED_POSITION_COMPONENTS} elements (a 4th is dropped), got {count}"
            )
        if count > MAX_POSITION_COMPONENTS:
            logger.debug(f"Dropping extra position component {values[MAX_POSITION_COMPONENTS]!r}")

        altitude = values[2] if count > 2 else None
        return cls(values[0], values[1], altitude)

    @property
    def xy(self) -> tuple[float, float]:
        """Planar (x, y) pair, i.e. (longitude, latitude)."""
        return (self.longitude, self.latitude)

    def to_json(self) -> list[float]:
        """Encode as ``[lon, lat]`` or ``[lon, lat, alt]``."""
        if self.altitude is None:
            return [self.longitude, self.latitude]
        return [self.longitude, self.latitude, self.altitude]

    @classmethod
    def from_json(cls, value: Sequence[float]) -> "Position":
        return cls.from_sequence(value)
