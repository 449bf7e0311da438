"""Units, significant weather conditions and display helpers."""

from __future__ import annotations

from enum import Enum


class Unit(str, Enum):
    """Unit attached to a forecast metric."""

    CELSIUS = "°C"
    METRES = "m"
    METRES_PER_SECOND = "m/s"
    MILLIMETRES = "mm"
    MILLIMETRES_PER_HOUR = "mm/hour"
    PASCALS = "Pa"
    PERCENT = "%"
    DEGREES = "°"
    NONE = ""


class Conditions(Enum):
    """Most significant weather conditions, keyed by significant weather code.

    Code 4 is not used by the Met Office.
    """

    TRACE_RAIN = -1
    CLEAR_NIGHT = 0
    SUNNY_DAY = 1
    PARTLY_CLOUDY_NIGHT = 2
    PARTLY_CLOUDY_DAY = 3
    MIST = 5
    FOG = 6
    CLOUDY = 7
    OVERCAST = 8
    LIGHT_RAIN_SHOWER_NIGHT = 9
    LIGHT_RAIN_SHOWER_DAY = 10
    DRIZZLE = 11
    LIGHT_RAIN = 12
    HEAVY_RAIN_SHOWER_NIGHT = 13
    HEAVY_RAIN_SHOWER_DAY = 14
    HEAVY_RAIN = 15
    SLEET_SHOWER_NIGHT = 16
    SLEET_SHOWER_DAY = 17
    SLEET = 18
    HAIL_SHOWER_NIGHT = 19
    HAIL_SHOWER_DAY = 20
    HAIL = 21
    LIGHT_SNOW_SHOWER_NIGHT = 22
    LIGHT_SNOW_SHOWER_DAY = 23
    LIGHT_SNOW = 24
    HEAVY_SNOW_SHOWER_NIGHT = 25
    HEAVY_SNOW_SHOWER_DAY = 26
    HEAVY_SNOW = 27
    THUNDER_SHOWER_NIGHT = 28
    THUNDER_SHOWER_DAY = 29
    THUNDER = 30

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def is_night(self) -> bool:
        return self.name.endswith("_NIGHT")

    def __str__(self) -> str:
        return self.description


_DESCRIPTIONS: dict[Conditions, str] = {
    Conditions.TRACE_RAIN: "Trace of rain",
    Conditions.CLEAR_NIGHT: "Clear",
    Conditions.SUNNY_DAY: "Sunny",
    Conditions.PARTLY_CLOUDY_NIGHT: "Partly cloudy",
    Conditions.PARTLY_CLOUDY_DAY: "Partly cloudy",
    Conditions.MIST: "Mist",
    Conditions.FOG: "Fog",
    Conditions.CLOUDY: "Cloudy",
    Conditions.OVERCAST: "Overcast",
    Conditions.LIGHT_RAIN_SHOWER_NIGHT: "Light rain shower",
    Conditions.LIGHT_RAIN_SHOWER_DAY: "Light rain shower",
    Conditions.DRIZZLE: "Drizzle",
    Conditions.LIGHT_RAIN: "Light rain",
    Conditions.HEAVY_RAIN_SHOWER_NIGHT: "Heavy rain shower",
    Conditions.HEAVY_RAIN_SHOWER_DAY: "Heavy rain shower",
    Conditions.HEAVY_RAIN: "Heavy rain",
    Conditions.SLEET_SHOWER_NIGHT: "Sleet shower",
    Conditions.SLEET_SHOWER_DAY: "Sleet shower",
    Conditions.SLEET: "Sleet",
    Conditions.HAIL_SHOWER_NIGHT: "Hail shower",
    Conditions.HAIL_SHOWER_DAY: "Hail shower",
    Conditions.HAIL: "Hail",
    Conditions.LIGHT_SNOW_SHOWER_NIGHT: "Light snow shower",
    Conditions.LIGHT_SNOW_SHOWER_DAY: "Light snow shower",
    Conditions.LIGHT_SNOW: "Light snow",
    Conditions.HEAVY_SNOW_SHOWER_NIGHT: "Heavy snow shower",
    Conditions.HEAVY_SNOW_SHOWER_DAY: "Heavy snow shower",
    Conditions.HEAVY_SNOW: "Heavy snow",
    Conditions.THUNDER_SHOWER_NIGHT: "Thunder shower",
    Conditions.THUNDER_SHOWER_DAY: "Thunder shower",
    Conditions.THUNDER: "Thunder",
}

_DECIMALS: dict[Unit, int] = {
    Unit.CELSIUS: 2,
    Unit.METRES: 0,
    Unit.METRES_PER_SECOND: 2,
    Unit.MILLIMETRES: 2,
    Unit.MILLIMETRES_PER_HOUR: 2,
    Unit.PASCALS: 0,
    Unit.PERCENT: 0,
    Unit.DEGREES: 0,
}


def format_value(value: float | int | Conditions | None, unit: Unit) -> str:
    """Render a metric value with its unit, e.g. ``12.30°C`` or ``4.10 m/s``."""
    if value is None:
        return "n/a"
    if isinstance(value, Conditions):
        return value.description
    decimals = _DECIMALS.get(unit)
    if decimals is None:
        return str(value)
    number = f"{value:.{decimals}f}"
    if unit in (Unit.CELSIUS, Unit.PERCENT, Unit.DEGREES, Unit.METRES):
        return f"{number}{unit.value}"
    return f"{number} {unit.value}"


def uv_advice(uv_index: int) -> str:
    """Safety advice message for a UV index value."""
    if uv_index <= 2:
        return "No protection required. You can safely stay outside."
    if uv_index <= 5:
        return "Seek shade during midday hours, cover up and wear sunscreen."
    return "Avoid being outside during midday hours. Shirt, sunscreen and hat are essential."
