"""TimePoint parsing and zone rendering tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone, tzinfo

import pytest

from metoffice_datahub.exceptions import TimeZoneError, UnknownZoneError
from metoffice_datahub.timepoint import TimePoint


def test_parse_api_timestamp_without_seconds() -> None:
    point = TimePoint.parse("2023-07-05T10:00Z")
    assert point.instant == datetime(2023, 7, 5, 10, 0, tzinfo=UTC)
    assert point.instant.tzinfo == UTC


def test_parse_normalizes_offsets_to_utc() -> None:
    point = TimePoint.parse("2023-07-05T12:00:00+02:00")
    assert point.instant == datetime(2023, 7, 5, 10, 0, tzinfo=UTC)
    assert point.instant.utcoffset() == timedelta(0)


@pytest.mark.parametrize("text", ["2023-07-05T10:00", "not a time", "", "2023-13-01T00:00Z"])
def test_parse_rejects_naive_or_invalid_text(text: str) -> None:
    with pytest.raises(ValueError):
        TimePoint.parse(text)


def test_isoformat_uses_z_suffix() -> None:
    assert str(TimePoint.parse("2023-07-05T10:00Z")) == "2023-07-05T10:00:00Z"


def test_in_tz_renders_summer_time_in_london() -> None:
    local = TimePoint.parse("2023-07-05T10:00Z").in_tz("Europe/London")
    assert local.hour == 11
    assert local.utcoffset() == timedelta(hours=1)
    assert local == datetime(2023, 7, 5, 10, 0, tzinfo=UTC)


def test_in_tz_renders_sanaa_local_time() -> None:
    local = TimePoint.parse("2023-07-05T10:00Z").in_tz("Asia/Aden")
    assert local.hour == 13


@pytest.mark.parametrize("zone", ["Mars/Olympus_Mons", "../etc/passwd"])
def test_unknown_zone_is_propagated(zone: str) -> None:
    point = TimePoint.parse("2023-07-05T10:00Z")
    with pytest.raises(UnknownZoneError) as excinfo:
        point.in_tz(zone)
    assert excinfo.value.zone == zone
    assert isinstance(excinfo.value, TimeZoneError)


def test_in_tz_delegates_to_injected_lookup() -> None:
    calls: list[str] = []

    def _fixed_lookup(zone: str) -> tzinfo:
        calls.append(zone)
        return timezone(timedelta(hours=-5), "EST")

    point = TimePoint.parse("2023-07-05T10:00Z")
    assert point.in_tz("America/New_York", lookup=_fixed_lookup).hour == 5
    assert point.in_tz("America/New_York", lookup=_fixed_lookup).hour == 5
    assert calls == ["America/New_York", "America/New_York"]


def test_lookup_key_error_becomes_unknown_zone() -> None:
    def _missing(zone: str) -> tzinfo:
        raise KeyError(zone)

    with pytest.raises(UnknownZoneError):
        TimePoint.parse("2023-07-05T10:00Z").in_tz("Nowhere/City", lookup=_missing)


def test_naive_datetime_is_rejected_by_model() -> None:
    with pytest.raises(ValueError):
        TimePoint(instant=datetime(2023, 7, 5, 10, 0))


@pytest.mark.parametrize("text", ["0001-01-01T00:00+01:00", "9999-12-31T23:59-01:00"])
def test_parse_rejects_instants_outside_utc_range(text: str) -> None:
    with pytest.raises(ValueError, match="outside the UTC range"):
        TimePoint.parse(text)


@pytest.mark.parametrize("text", [" 2023-07-05T10:00Z", "2023-07-05T10:00Z\n", "2023-07-05T10:00Z "])
def test_parse_rejects_surrounding_whitespace(text: str) -> None:
    with pytest.raises(ValueError):
        TimePoint.parse(text)
