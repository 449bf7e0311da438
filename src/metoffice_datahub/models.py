"""Typed models for decoded forecasts."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from .geo import Coordinate
from .schema import Cadence, CadenceSchema, schema_for
from .timepoint import TimePoint
from .units import Conditions, format_value

MetricValue = float | int | Conditions | None


class Prediction(BaseModel):
    """One time-stamped entry of a forecast.

    ``readings`` holds every metric the cadence declares as ``(name, value)``
    pairs in schema order; ``None`` marks a value the upstream service
    legitimately left out. `metrics` is a read-only view of the same data.
    """

    model_config = ConfigDict(frozen=True)

    time: TimePoint
    readings: tuple[tuple[str, MetricValue], ...] = ()

    @property
    def metrics(self) -> Mapping[str, MetricValue]:
        return MappingProxyType(dict(self.readings))

    def __getitem__(self, name: str) -> MetricValue:
        return self.metrics[name]

    def get(self, name: str, default: MetricValue = None) -> MetricValue:
        return self.metrics.get(name, default)

    def absent_metrics(self) -> tuple[str, ...]:
        """Names of metrics decoded as legitimately absent, in schema order."""
        return tuple(name for name, value in self.readings if value is None)


class Forecast(BaseModel):
    """A decoded forecast for one site and one cadence."""

    model_config = ConfigDict(frozen=True)

    cadence: Cadence
    location: Coordinate
    altitude: float | None = Field(default=None, description="Site height above sea level (m)")
    location_name: str | None = Field(
        default=None, description="Site name, present when requested via the URL"
    )
    request_point_distance: float = Field(
        description="Distance in metres from the requested point to the forecast site"
    )
    model_run_time: TimePoint
    predictions: tuple[Prediction, ...] = ()

    @property
    def cadence_schema(self) -> CadenceSchema:
        return schema_for(self.cadence)

    def expected_gap_indices(self) -> range:
        """Indices at which the upstream is known to omit the optional metrics."""
        return self.cadence_schema.missing_data.indices(len(self.predictions))

    def describe(self, index: int, name: str) -> str:
        """Render one metric of one prediction with its unit."""
        spec = self.cadence_schema.metric(name)
        return format_value(self.predictions[index][name], spec.unit)
