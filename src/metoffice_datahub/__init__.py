"""Typed URL building and response decoding for Met Office site-specific forecasts."""

from .config import Settings, load_settings
from .decoder import ForecastDecoder, decode, decode_daily, decode_hourly, decode_three_hourly
from .exceptions import (
    ConfigError,
    CoordinateValidationError,
    DecodeError,
    MalformedDocumentError,
    MetOfficeError,
    MissingRequiredFieldError,
    NotFiniteError,
    OutOfRangeError,
    TimeZoneError,
    TypeMismatchError,
    UnknownZoneError,
)
from .geo import Coordinate, validate_coordinate
from .log_setup import JsonConsoleFormatter, configure_logging, setup_logger
from .models import Forecast, Prediction
from .schema import DAILY, HOURLY, THREE_HOURLY, Cadence, CadenceSchema, schema_for
from .timepoint import TimePoint
from .units import Conditions
from .urls import ForecastUrl, ForecastUrlBuilder, build_url

__all__ = [
    "DAILY",
    "HOURLY",
    "THREE_HOURLY",
    "Cadence",
    "CadenceSchema",
    "Conditions",
    "ConfigError",
    "Coordinate",
    "CoordinateValidationError",
    "DecodeError",
    "Forecast",
    "ForecastDecoder",
    "ForecastUrl",
    "ForecastUrlBuilder",
    "JsonConsoleFormatter",
    "MalformedDocumentError",
    "MetOfficeError",
    "MissingRequiredFieldError",
    "NotFiniteError",
    "OutOfRangeError",
    "Prediction",
    "Settings",
    "TimePoint",
    "TimeZoneError",
    "TypeMismatchError",
    "UnknownZoneError",
    "build_url",
    "configure_logging",
    "decode",
    "decode_daily",
    "decode_hourly",
    "decode_three_hourly",
    "load_settings",
    "schema_for",
    "setup_logger",
    "validate_coordinate",
]
