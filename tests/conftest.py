"""Sample site-specific forecast documents shaped like real DataHub responses."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

HOURLY_TRAILING_GAP_KEYS = (
    "maxScreenAirTemp",
    "minScreenAirTemp",
    "max10mWindGust",
    "totalPrecipAmount",
    "totalSnowAmount",
)
THREE_HOURLY_TRAILING_GAP_KEYS = HOURLY_TRAILING_GAP_KEYS
DAILY_LEADING_GAP_KEYS = (
    "maxUvIndex",
    "daySignificantWeatherCode",
    "dayMaxFeelsLikeTemp",
    "dayProbabilityOfPrecipitation",
    "dayProbabilityOfSnow",
    "dayProbabilityOfHeavySnow",
    "dayProbabilityOfRain",
    "dayProbabilityOfHeavyRain",
    "dayProbabilityOfHail",
    "dayProbabilityOfSferics",
)


def _stamp(start: datetime, step: timedelta, index: int) -> str:
    return (start + step * index).strftime("%Y-%m-%dT%H:%MZ")


def _hourly_entry(index: int) -> dict[str, Any]:
    start = datetime(2023, 7, 5, 10, 0, tzinfo=UTC)
    return {
        "time": _stamp(start, timedelta(hours=1), index),
        "screenTemperature": 16.5 + (index % 6) * 0.25,
        "maxScreenAirTemp": 17.01,
        "minScreenAirTemp": 15.92,
        "screenDewPointTemperature": 11.2,
        "feelsLikeTemperature": 14.86,
        "windSpeed10m": 4.12,
        "windGustSpeed10m": 8.75,
        "max10mWindGust": 9.1,
        "windDirectionFrom10m": 245,
        "screenRelativeHumidity": 71.35,
        "visibility": 21250,
        "mslp": 101250,
        "precipitationRate": 0.0,
        "totalPrecipAmount": 0.0,
        "totalSnowAmount": 0,
        "probOfPrecipitation": 9,
        "uvIndex": 3 if index % 24 < 10 else 0,
        "significantWeatherCode": 3 if index % 24 < 10 else 2,
    }


def _three_hourly_entry(index: int) -> dict[str, Any]:
    start = datetime(2023, 7, 5, 9, 0, tzinfo=UTC)
    return {
        "time": _stamp(start, timedelta(hours=3), index),
        "maxScreenAirTemp": 18.4,
        "minScreenAirTemp": 14.06,
        "max10mWindGust": 10.3,
        "significantWeatherCode": 7,
        "totalPrecipAmount": 0.12,
        "totalSnowAmount": 0,
        "windSpeed10m": 3.9,
        "windDirectionFrom10m": 230,
        "windGustSpeed10m": 8.02,
        "visibility": 18000,
        "mslp": 101310,
        "screenRelativeHumidity": 77.1,
        "feelsLikeTemp": 15.3,
        "uvIndex": 2,
        "probOfPrecipitation": 14,
        "probOfSnow": 0,
        "probOfHeavySnow": 0,
        "probOfRain": 14,
        "probOfHeavyRain": 4,
        "probOfHail": 0,
        "probOfSferics": 1,
    }


def _daily_entry(index: int) -> dict[str, Any]:
    start = datetime(2023, 7, 5, 0, 0, tzinfo=UTC)
    return {
        "time": _stamp(start, timedelta(days=1), index),
        "midday10MWindSpeed": 5.3,
        "midnight10MWindSpeed": 2.86,
        "midday10MWindDirection": 250,
        "midnight10MWindDirection": 215,
        "midday10MWindGust": 10.8,
        "midnight10MWindGust": 6.2,
        "middayVisibility": 24000,
        "midnightVisibility": 19500,
        "middayRelativeHumidity": 62.3,
        "midnightRelativeHumidity": 88.5,
        "middayMslp": 101420,
        "midnightMslp": 101560,
        "maxUvIndex": 5,
        "daySignificantWeatherCode": 1,
        "nightSignificantWeatherCode": 0,
        "dayMaxScreenTemperature": 21.4,
        "nightMinScreenTemperature": 11.7,
        "dayUpperBoundMaxTemp": 23.9,
        "nightUpperBoundMinTemp": 13.8,
        "dayLowerBoundMaxTemp": 19.2,
        "nightLowerBoundMinTemp": 9.6,
        "dayMaxFeelsLikeTemp": 20.3,
        "nightMinFeelsLikeTemp": 10.1,
        "dayUpperBoundMaxFeelsLikeTemp": 22.8,
        "nightUpperBoundMinFeelsLikeTemp": 12.4,
        "dayLowerBoundMaxFeelsLikeTemp": 18.0,
        "nightLowerBoundMinFeelsLikeTemp": 7.9,
        "dayProbabilityOfPrecipitation": 11,
        "nightProbabilityOfPrecipitation": 6,
        "dayProbabilityOfSnow": 0,
        "nightProbabilityOfSnow": 0,
        "dayProbabilityOfHeavySnow": 0,
        "nightProbabilityOfHeavySnow": 0,
        "dayProbabilityOfRain": 11,
        "nightProbabilityOfRain": 6,
        "dayProbabilityOfHeavyRain": 3,
        "nightProbabilityOfHeavyRain": 1,
        "dayProbabilityOfHail": 0,
        "nightProbabilityOfHail": 0,
        "dayProbabilityOfSferics": 2,
        "nightProbabilityOfSferics": 1,
    }


def make_document(
    entries: list[dict[str, Any]],
    *,
    coordinates: list[float] | None = None,
    name: str | None = "Exeter",
    model_run: str = "2023-07-05T10:00Z",
    distance: float = 27.9057,
) -> dict[str, Any]:
    properties: dict[str, Any] = {
        "requestPointDistance": distance,
        "modelRunDate": model_run,
        "timeSeries": entries,
    }
    if name is not None:
        properties["location"] = {"name": name}
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {
                    "type": "Point",
                    "coordinates": coordinates or [-3.474, 50.727, 27.0],
                },
                "properties": properties,
            }
        ],
        "parameters": [{"screenTemperature": {"type": "Parameter"}}],
    }


def make_hourly_entries(count: int = 48) -> list[dict[str, Any]]:
    entries = [_hourly_entry(i) for i in range(count)]
    for entry in entries[-3:]:
        for key in HOURLY_TRAILING_GAP_KEYS:
            entry.pop(key)
    return entries


def make_three_hourly_entries(count: int = 20) -> list[dict[str, Any]]:
    entries = [_three_hourly_entry(i) for i in range(count)]
    for entry in entries[-3:]:
        for key in THREE_HOURLY_TRAILING_GAP_KEYS:
            entry.pop(key)
    return entries


def make_daily_entries(count: int = 8) -> list[dict[str, Any]]:
    entries = [_daily_entry(i) for i in range(count)]
    for key in DAILY_LEADING_GAP_KEYS:
        entries[0].pop(key)
    return entries


def to_bytes(document: dict[str, Any]) -> bytes:
    return json.dumps(document).encode("utf-8")


@pytest.fixture
def hourly_document() -> dict[str, Any]:
    return make_document(make_hourly_entries())


@pytest.fixture
def three_hourly_document() -> dict[str, Any]:
    return make_document(make_three_hourly_entries())


@pytest.fixture
def daily_document() -> dict[str, Any]:
    return make_document(make_daily_entries(), model_run="2023-07-05T09:00Z")
