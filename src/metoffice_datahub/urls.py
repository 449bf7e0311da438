"""Request URL construction for the site-specific point forecast endpoints.

Building a URL performs no I/O and attaches no credentials. The caller sends
the request with its own HTTP client and adds the ``apikey`` header itself.
"""

from __future__ import annotations

from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_BASE_URL, DEFAULT_COORDINATE_PRECISION, Settings
from .geo import Coordinate
from .schema import Cadence


class ForecastUrl(BaseModel):
    """A fully built request URL. ``str()`` yields the exact URL text."""

    model_config = ConfigDict(frozen=True)

    cadence: Cadence
    coordinate: Coordinate
    url: str

    def __str__(self) -> str:
        return self.url


def _format_degrees(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text


class ForecastUrlBuilder(BaseModel):
    """Pure `(Coordinate, Cadence) -> ForecastUrl` function with fixed options."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    precision: int = Field(default=DEFAULT_COORDINATE_PRECISION, ge=1, le=10)
    include_location_name: bool = True
    exclude_parameter_metadata: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> ForecastUrlBuilder:
        return cls(
            base_url=settings.base_url,
            precision=settings.coordinate_precision,
            include_location_name=settings.include_location_name,
            exclude_parameter_metadata=settings.exclude_parameter_metadata,
        )

    def build(self, coordinate: Coordinate, cadence: Cadence) -> ForecastUrl:
        cadence = Cadence(cadence)
        params: list[tuple[str, str]] = []
        if self.exclude_parameter_metadata:
            params.append(("excludeParameterMetadata", "true"))
        if self.include_location_name:
            params.append(("includeLocationName", "true"))
        params.append(("latitude", _format_degrees(coordinate.latitude, self.precision)))
        params.append(("longitude", _format_degrees(coordinate.longitude, self.precision)))

        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        url = f"{base}{cadence.value}?{urlencode(params)}"
        return ForecastUrl(cadence=cadence, coordinate=coordinate, url=url)


_DEFAULT_BUILDER = ForecastUrlBuilder()


def build_url(coordinate: Coordinate, cadence: Cadence) -> ForecastUrl:
    """Build the request URL for ``cadence`` at ``coordinate`` with default options."""
    return _DEFAULT_BUILDER.build(coordinate, cadence)
