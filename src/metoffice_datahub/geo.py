"""Geographic coordinate validation."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import CoordinateValidationError, NotFiniteError, OutOfRangeError

LATITUDE_BOUND = 90.0
LONGITUDE_BOUND = 180.0


def _as_degrees(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise CoordinateValidationError(
            f"{name} must be a number, got {type(value).__name__}."
        )
    degrees = float(value)
    if not math.isfinite(degrees):
        raise NotFiniteError(f"{name} must be finite, got {degrees}.")
    return degrees


def _check_range(latitude: float, longitude: float) -> None:
    if not (-LATITUDE_BOUND <= latitude <= LATITUDE_BOUND):
        raise OutOfRangeError(f"Invalid latitude {latitude}; expected between -90 and 90.")
    if not (-LONGITUDE_BOUND <= longitude <= LONGITUDE_BOUND):
        raise OutOfRangeError(f"Invalid longitude {longitude}; expected between -180 and 180.")


class Coordinate(BaseModel):
    """A point in the WGS 84 reference system, in decimal degrees.

    Instances are always in range: construction is the only place the bounds
    are checked, so downstream code never re-validates. `validate_coordinate`
    is the typed entry point and raises `OutOfRangeError` or `NotFiniteError`;
    constructing the model directly raises pydantic `ValidationError` instead
    and never coerces strings.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(strict=True)
    longitude: float = Field(strict=True)

    @model_validator(mode="after")
    def check_bounds(self) -> Coordinate:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError("Coordinate components must be finite.")
        if not (-LATITUDE_BOUND <= self.latitude <= LATITUDE_BOUND):
            raise ValueError("latitude must be between -90 and 90.")
        if not (-LONGITUDE_BOUND <= self.longitude <= LONGITUDE_BOUND):
            raise ValueError("longitude must be between -180 and 180.")
        return self

    @classmethod
    def from_degrees(cls, latitude: Any, longitude: Any) -> Coordinate:
        """Validate raw degrees, raising library errors rather than pydantic ones."""
        return validate_coordinate(latitude, longitude)

    def __str__(self) -> str:
        ns = "N" if self.latitude >= 0 else "S"
        ew = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.3f}° {ns}, {abs(self.longitude):.3f}° {ew}"


def validate_coordinate(latitude: Any, longitude: Any) -> Coordinate:
    """Validate a latitude/longitude pair into a `Coordinate`.

    Raises:
        NotFiniteError: either component is NaN or infinite.
        OutOfRangeError: latitude outside [-90, 90] or longitude outside [-180, 180].
        CoordinateValidationError: either component is not a real number.
    """
    lat = _as_degrees("latitude", latitude)
    lon = _as_degrees("longitude", longitude)
    _check_range(lat, lon)
    return Coordinate(latitude=lat, longitude=lon)
