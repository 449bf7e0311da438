"""Absolute instants decoded from forecast documents."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AwareDatetime, BaseModel, ConfigDict, field_validator

from .exceptions import UnknownZoneError

ZoneLookup = Callable[[str], tzinfo]


def zoneinfo_lookup(zone: str) -> tzinfo:
    """Resolve an IANA identifier such as ``Europe/London`` via ``zoneinfo``."""
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise UnknownZoneError(zone) from exc


class TimePoint(BaseModel):
    """A single instant in UTC."""

    model_config = ConfigDict(frozen=True)

    instant: AwareDatetime

    @field_validator("instant")
    @classmethod
    def to_utc(cls, value: datetime) -> datetime:
        try:
            return value.astimezone(UTC)
        except OverflowError as exc:
            # Offsets at either end of the datetime range cannot move to UTC.
            raise ValueError(f"timestamp {value.isoformat()} is outside the UTC range") from exc

    @classmethod
    def parse(cls, text: str) -> TimePoint:
        """Parse an API timestamp such as ``2023-07-05T10:00Z``.

        Raises ValueError when the text is not ISO 8601 or carries no offset.
        """
        candidate = text
        if candidate.endswith(("Z", "z")):
            candidate = candidate[:-1] + "+00:00"
        parsed = datetime.fromisoformat(candidate)
        if parsed.tzinfo is None:
            raise ValueError(f"timestamp {text!r} has no UTC offset")
        return cls(instant=parsed)

    def in_tz(self, zone: str, lookup: ZoneLookup | None = None) -> datetime:
        """Render this instant as local time in ``zone``.

        The offset and DST computation belongs to ``lookup``; an identifier it
        cannot resolve surfaces as `UnknownZoneError`. Nothing is cached here.
        """
        resolve = lookup or zoneinfo_lookup
        try:
            tz = resolve(zone)
        except UnknownZoneError:
            raise
        except (LookupError, ValueError) as exc:
            raise UnknownZoneError(zone) from exc
        return self.instant.astimezone(tz)

    def isoformat(self) -> str:
        return self.instant.isoformat().replace("+00:00", "Z")

    def __str__(self) -> str:
        return self.isoformat()
