"""Typed decoding of site-specific forecast documents.

The response is a GeoJSON ``FeatureCollection`` whose first feature carries
the site coordinates, the model run time and the ``timeSeries`` array. Each
``timeSeries`` entry is decoded against the cadence's metric table: optional
metrics may be omitted or ``null``, required ones may not, and a value of the
wrong JSON type is an error either way.

Decoding parses the whole buffer before building the result, so peak memory
is the raw bytes plus the parsed JSON tree plus the decoded `Forecast`.
For the 10-30 KB documents the service returns that is well under 1 MB.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from .exceptions import (
    MalformedDocumentError,
    MissingRequiredFieldError,
    TypeMismatchError,
)
from .geo import LATITUDE_BOUND, LONGITUDE_BOUND, Coordinate
from .models import Forecast, MetricValue, Prediction
from .schema import Cadence, CadenceSchema, MetricKind, MetricSpec, schema_for
from .timepoint import TimePoint
from .units import Conditions

_MISSING = object()

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def _json_type(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool) and not _is_number(value):
        return "number outside the float range"
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _load_document(raw: bytes | bytearray | memoryview | str) -> Any:
    if isinstance(raw, memoryview):
        raw = raw.tobytes()
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError, RecursionError) as exc:
        raise MalformedDocumentError(f"Forecast response is not valid JSON: {exc}") from exc
    except TypeError as exc:
        raise MalformedDocumentError(
            f"Forecast response must be bytes or str, got {type(raw).__name__}."
        ) from exc


def _is_number(value: Any) -> bool:
    # Overflowing literals such as 1e400 parse to inf; integer literals past
    # the float range parse to int and must still convert.
    if isinstance(value, float):
        return math.isfinite(value)
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    try:
        float(value)
    except OverflowError:
        return False
    return True


class ForecastDecoder:
    """Decodes raw response bytes into a `Forecast` for one cadence schema."""

    def __init__(self, schema: CadenceSchema, logger: logging.Logger | None = None) -> None:
        self.schema = schema
        self.logger = logger or logging.getLogger(__name__)

    def decode(self, raw: bytes | bytearray | memoryview | str) -> Forecast:
        """Decode a full response body. All-or-nothing: any error raises."""
        document = _load_document(raw)
        forecast = self._decode_document(document)
        self.logger.debug(
            "Decoded %s forecast with %d predictions",
            self.schema.cadence.value,
            len(forecast.predictions),
            extra={
                "context": {
                    "location_name": forecast.location_name,
                    "model_run_time": str(forecast.model_run_time),
                }
            },
        )
        return forecast

    def _decode_document(self, document: Any) -> Forecast:
        root = self._expect(document, dict, "$", "object")
        features = self._require(root, "features", "features")
        features = self._expect(features, list, "features", "array")
        if not features:
            raise MissingRequiredFieldError("features[0]")
        feature = self._expect(features[0], dict, "features[0]", "object")

        geometry = self._require(feature, "geometry", "features[0].geometry")
        geometry = self._expect(geometry, dict, "features[0].geometry", "object")
        location, altitude = self._decode_coordinates(geometry)

        props_path = "features[0].properties"
        properties = self._require(feature, "properties", props_path)
        properties = self._expect(properties, dict, props_path, "object")

        model_run_time = self._decode_time(
            self._require(properties, "modelRunDate", f"{props_path}.modelRunDate"),
            f"{props_path}.modelRunDate",
        )
        distance_path = f"{props_path}.requestPointDistance"
        distance = self._require(properties, "requestPointDistance", distance_path)
        if not _is_number(distance):
            raise TypeMismatchError(distance_path, expected="number", actual=_json_type(distance))

        series_path = f"{props_path}.timeSeries"
        series = self._require(properties, "timeSeries", series_path)
        series = self._expect(series, list, series_path, "array")
        predictions = tuple(
            self._decode_prediction(entry, f"{series_path}[{index}]")
            for index, entry in enumerate(series)
        )

        return Forecast(
            cadence=self.schema.cadence,
            location=location,
            altitude=altitude,
            location_name=self._decode_location_name(properties, props_path),
            request_point_distance=float(distance),
            model_run_time=model_run_time,
            predictions=predictions,
        )

    def _decode_coordinates(self, geometry: dict[str, Any]) -> tuple[Coordinate, float | None]:
        path = "features[0].geometry.coordinates"
        coords = self._expect(self._require(geometry, "coordinates", path), list, path, "array")
        if len(coords) not in (2, 3):
            raise TypeMismatchError(
                path,
                expected="[longitude, latitude] or [longitude, latitude, altitude]",
                actual=f"array of length {len(coords)}",
            )
        for index, item in enumerate(coords):
            if not _is_number(item):
                raise TypeMismatchError(
                    f"{path}[{index}]", expected="number", actual=_json_type(item)
                )
        # GeoJSON order is [lon, lat, alt].
        lon, lat = float(coords[0]), float(coords[1])
        if not (
            -LATITUDE_BOUND <= lat <= LATITUDE_BOUND
            and -LONGITUDE_BOUND <= lon <= LONGITUDE_BOUND
        ):
            raise TypeMismatchError(
                path, expected="coordinates within WGS 84 bounds", actual=f"[{lon}, {lat}]"
            )
        altitude = float(coords[2]) if len(coords) == 3 else None
        return Coordinate(latitude=lat, longitude=lon), altitude

    def _decode_location_name(self, properties: dict[str, Any], props_path: str) -> str | None:
        location = properties.get("location")
        if location is None:
            return None
        location = self._expect(location, dict, f"{props_path}.location", "object")
        name = location.get("name")
        if name is None:
            return None
        if not isinstance(name, str):
            raise TypeMismatchError(
                f"{props_path}.location.name", expected="string", actual=_json_type(name)
            )
        return name

    def _decode_prediction(self, entry: Any, path: str) -> Prediction:
        entry = self._expect(entry, dict, path, "object")
        time = self._decode_time(self._require(entry, "time", f"{path}.time"), f"{path}.time")
        readings = tuple(
            (spec.name, self._decode_metric(entry, spec, path)) for spec in self.schema.metrics
        )
        return Prediction(time=time, readings=readings)

    def _decode_metric(self, entry: dict[str, Any], spec: MetricSpec, path: str) -> MetricValue:
        field = f"{path}.{spec.key}"
        value = entry.get(spec.key, _MISSING)
        if value is _MISSING or value is None:
            if spec.optional:
                return None
            raise MissingRequiredFieldError(field)

        if not _is_number(value):
            raise TypeMismatchError(field, expected=spec.kind.value, actual=_json_type(value))
        if spec.kind is MetricKind.NUMBER:
            return float(value)
        if isinstance(value, float):
            if not value.is_integer():
                raise TypeMismatchError(field, expected=spec.kind.value, actual=repr(value))
            value = int(value)
        if spec.kind is MetricKind.INTEGER:
            return value
        try:
            return Conditions(value)
        except ValueError as exc:
            raise TypeMismatchError(
                field, expected="significant weather code", actual=str(value)
            ) from exc

    @staticmethod
    def _decode_time(value: Any, field: str) -> TimePoint:
        if not isinstance(value, str):
            raise TypeMismatchError(field, expected="timestamp string", actual=_json_type(value))
        try:
            return TimePoint.parse(value)
        except ValueError as exc:
            raise TypeMismatchError(
                field, expected="ISO 8601 timestamp with offset", actual=repr(value)
            ) from exc

    @staticmethod
    def _require(container: dict[str, Any], key: str, field: str) -> Any:
        value = container.get(key)
        if value is None:
            raise MissingRequiredFieldError(field)
        return value

    @staticmethod
    def _expect(value: Any, kind: type, field: str, expected: str) -> Any:
        if not isinstance(value, kind):
            raise TypeMismatchError(field, expected=expected, actual=_json_type(value))
        return value


def decoder_for(cadence: Cadence | str) -> ForecastDecoder:
    """Return a decoder bound to the metric table of ``cadence``."""
    return ForecastDecoder(schema_for(cadence))


def decode(raw: bytes | bytearray | memoryview | str, cadence: Cadence | str) -> Forecast:
    """Decode a response body for the cadence the caller requested."""
    return decoder_for(cadence).decode(raw)


def decode_hourly(raw: bytes | bytearray | memoryview | str) -> Forecast:
    return decode(raw, Cadence.HOURLY)


def decode_three_hourly(raw: bytes | bytearray | memoryview | str) -> Forecast:
    return decode(raw, Cadence.THREE_HOURLY)


def decode_daily(raw: bytes | bytearray | memoryview | str) -> Forecast:
    return decode(raw, Cadence.DAILY)
