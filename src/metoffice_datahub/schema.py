"""Per-cadence metric tables.

Each cadence declares which metrics its ``timeSeries`` entries carry, which of
them the upstream service is known to leave out, and where in the series those
gaps occur. The optionality table is authoritative for decoding; the gap rule
is informational and never consulted by the decoder.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from .units import Unit


class Cadence(str, Enum):
    """Forecast granularity. The value is the endpoint path segment."""

    HOURLY = "hourly"
    THREE_HOURLY = "three-hourly"
    DAILY = "daily"


class MetricKind(str, Enum):
    NUMBER = "number"
    INTEGER = "integer"
    WEATHER_CODE = "weather_code"


@dataclass(frozen=True)
class MetricSpec:
    """One metric of a cadence: JSON key, Python name, kind and optionality."""

    key: str
    name: str
    unit: Unit
    kind: MetricKind = MetricKind.NUMBER
    optional: bool = False


@dataclass(frozen=True)
class MissingDataRule:
    """Where in the time series the optional metrics are known to be absent."""

    position: Literal["leading", "trailing"]
    count: int

    def indices(self, length: int) -> range:
        """Indices of a ``length``-entry series the upstream leaves incomplete."""
        span = min(self.count, length)
        if self.position == "leading":
            return range(0, span)
        return range(length - span, length)


@dataclass(frozen=True)
class CadenceSchema:
    cadence: Cadence
    metrics: tuple[MetricSpec, ...]
    missing_data: MissingDataRule

    def __post_init__(self) -> None:
        names = [m.name for m in self.metrics]
        keys = [m.key for m in self.metrics]
        if len(set(names)) != len(names) or len(set(keys)) != len(keys):
            raise ValueError(f"duplicate metric in {self.cadence.value} schema")

    @property
    def optional_metrics(self) -> tuple[MetricSpec, ...]:
        return tuple(m for m in self.metrics if m.optional)

    @property
    def required_metrics(self) -> tuple[MetricSpec, ...]:
        return tuple(m for m in self.metrics if not m.optional)

    def metric(self, name: str) -> MetricSpec:
        for spec in self.metrics:
            if spec.name == name:
                return spec
        raise KeyError(name)


def _required(key: str, name: str, unit: Unit, kind: MetricKind = MetricKind.NUMBER) -> MetricSpec:
    return MetricSpec(key=key, name=name, unit=unit, kind=kind)


def _optional(key: str, name: str, unit: Unit, kind: MetricKind = MetricKind.NUMBER) -> MetricSpec:
    return MetricSpec(key=key, name=name, unit=unit, kind=kind, optional=True)


_C = Unit.CELSIUS
_PCT = Unit.PERCENT
_MPS = Unit.METRES_PER_SECOND
_CODE = MetricKind.WEATHER_CODE
_INT = MetricKind.INTEGER

HOURLY = CadenceSchema(
    cadence=Cadence.HOURLY,
    metrics=(
        _required("screenTemperature", "temperature", _C),
        _optional("maxScreenAirTemp", "temperature_maximum", _C),
        _optional("minScreenAirTemp", "temperature_minimum", _C),
        _required("screenDewPointTemperature", "dew_point_temperature", _C),
        _required("feelsLikeTemperature", "temperature_feels_like", _C),
        _required("windSpeed10m", "wind_speed", _MPS),
        _required("windDirectionFrom10m", "wind_direction", Unit.DEGREES),
        _required("windGustSpeed10m", "wind_gust_speed", _MPS),
        _optional("max10mWindGust", "wind_gust_maximum_speed", _MPS),
        _required("visibility", "visibility", Unit.METRES),
        _required("screenRelativeHumidity", "relative_humidity", _PCT),
        _required("mslp", "pressure", Unit.PASCALS, _INT),
        _required("uvIndex", "uv_index", Unit.NONE, _INT),
        _required("significantWeatherCode", "conditions", Unit.NONE, _CODE),
        _required("precipitationRate", "precipitation_rate", Unit.MILLIMETRES_PER_HOUR),
        _optional("totalPrecipAmount", "precipitation_total", Unit.MILLIMETRES),
        _optional("totalSnowAmount", "snow_total", Unit.MILLIMETRES),
        _required("probOfPrecipitation", "precipitation_probability", _PCT),
    ),
    missing_data=MissingDataRule(position="trailing", count=3),
)

THREE_HOURLY = CadenceSchema(
    cadence=Cadence.THREE_HOURLY,
    metrics=(
        _optional("maxScreenAirTemp", "temperature_maximum", _C),
        _optional("minScreenAirTemp", "temperature_minimum", _C),
        _required("feelsLikeTemp", "temperature_feels_like", _C),
        _required("windSpeed10m", "wind_speed", _MPS),
        _required("windDirectionFrom10m", "wind_direction", Unit.DEGREES),
        _required("windGustSpeed10m", "wind_gust_speed", _MPS),
        _optional("max10mWindGust", "wind_gust_maximum_speed", _MPS),
        _required("visibility", "visibility", Unit.METRES),
        _required("screenRelativeHumidity", "relative_humidity", _PCT),
        _required("mslp", "pressure", Unit.PASCALS, _INT),
        _required("uvIndex", "uv_index", Unit.NONE, _INT),
        _required("significantWeatherCode", "conditions", Unit.NONE, _CODE),
        _optional("totalPrecipAmount", "precipitation_total", Unit.MILLIMETRES),
        _optional("totalSnowAmount", "snow_total", Unit.MILLIMETRES),
        _required("probOfPrecipitation", "precipitation_probability", _PCT),
        _required("probOfRain", "rain_probability", _PCT),
        _required("probOfHeavyRain", "heavy_rain_probability", _PCT),
        _required("probOfSnow", "snow_probability", _PCT),
        _required("probOfHeavySnow", "heavy_snow_probability", _PCT),
        _required("probOfHail", "hail_probability", _PCT),
        _required("probOfSferics", "lightning_probability", _PCT),
    ),
    missing_data=MissingDataRule(position="trailing", count=3),
)

# The first daily entry describes a day that has already started, so the
# daytime outlook fields are left out for it.
DAILY = CadenceSchema(
    cadence=Cadence.DAILY,
    metrics=(
        _required("midday10MWindSpeed", "day_wind_speed", _MPS),
        _required("midnight10MWindSpeed", "night_wind_speed", _MPS),
        _required("midday10MWindDirection", "day_wind_direction", Unit.DEGREES),
        _required("midnight10MWindDirection", "night_wind_direction", Unit.DEGREES),
        _required("midday10MWindGust", "day_wind_gust_speed", _MPS),
        _required("midnight10MWindGust", "night_wind_gust_speed", _MPS),
        _required("middayVisibility", "day_visibility", Unit.METRES),
        _required("midnightVisibility", "night_visibility", Unit.METRES),
        _required("middayRelativeHumidity", "day_relative_humidity", _PCT),
        _required("midnightRelativeHumidity", "night_relative_humidity", _PCT),
        _required("middayMslp", "day_pressure", Unit.PASCALS, _INT),
        _required("midnightMslp", "night_pressure", Unit.PASCALS, _INT),
        _optional("maxUvIndex", "day_uv_index_maximum", Unit.NONE, _INT),
        _optional("daySignificantWeatherCode", "day_conditions", Unit.NONE, _CODE),
        _required("nightSignificantWeatherCode", "night_conditions", Unit.NONE, _CODE),
        _required("dayMaxScreenTemperature", "day_temperature_maximum", _C),
        _required("nightMinScreenTemperature", "night_temperature_minimum", _C),
        _required("dayUpperBoundMaxTemp", "day_temperature_maximum_upper_bound", _C),
        _required("nightUpperBoundMinTemp", "night_temperature_minimum_upper_bound", _C),
        _required("dayLowerBoundMaxTemp", "day_temperature_maximum_lower_bound", _C),
        _required("nightLowerBoundMinTemp", "night_temperature_minimum_lower_bound", _C),
        _optional("dayMaxFeelsLikeTemp", "day_temperature_feels_like_maximum", _C),
        _required("nightMinFeelsLikeTemp", "night_temperature_feels_like_minimum", _C),
        _required(
            "dayUpperBoundMaxFeelsLikeTemp", "day_temperature_feels_like_maximum_upper_bound", _C
        ),
        _required(
            "nightUpperBoundMinFeelsLikeTemp",
            "night_temperature_feels_like_minimum_upper_bound",
            _C,
        ),
        _required(
            "dayLowerBoundMaxFeelsLikeTemp", "day_temperature_feels_like_maximum_lower_bound", _C
        ),
        _required(
            "nightLowerBoundMinFeelsLikeTemp",
            "night_temperature_feels_like_minimum_lower_bound",
            _C,
        ),
        _optional("dayProbabilityOfPrecipitation", "day_precipitation_probability", _PCT),
        _required("nightProbabilityOfPrecipitation", "night_precipitation_probability", _PCT),
        _optional("dayProbabilityOfSnow", "day_snow_probability", _PCT),
        _required("nightProbabilityOfSnow", "night_snow_probability", _PCT),
        _optional("dayProbabilityOfHeavySnow", "day_heavy_snow_probability", _PCT),
        _required("nightProbabilityOfHeavySnow", "night_heavy_snow_probability", _PCT),
        _optional("dayProbabilityOfRain", "day_rain_probability", _PCT),
        _required("nightProbabilityOfRain", "night_rain_probability", _PCT),
        _optional("dayProbabilityOfHeavyRain", "day_heavy_rain_probability", _PCT),
        _required("nightProbabilityOfHeavyRain", "night_heavy_rain_probability", _PCT),
        _optional("dayProbabilityOfHail", "day_hail_probability", _PCT),
        _required("nightProbabilityOfHail", "night_hail_probability", _PCT),
        _optional("dayProbabilityOfSferics", "day_lightning_probability", _PCT),
        _required("nightProbabilityOfSferics", "night_lightning_probability", _PCT),
    ),
    missing_data=MissingDataRule(position="leading", count=1),
)

SCHEMAS: dict[Cadence, CadenceSchema] = {
    Cadence.HOURLY: HOURLY,
    Cadence.THREE_HOURLY: THREE_HOURLY,
    Cadence.DAILY: DAILY,
}


def schema_for(cadence: Cadence | str) -> CadenceSchema:
    """Return the metric table for a cadence (enum member or path segment)."""
    return SCHEMAS[Cadence(cadence)]
