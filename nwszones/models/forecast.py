"""NWS zone forecast data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastPeriod:
    name: str
    detailed_forecast: str


@dataclass(frozen=True)
class Forecast:
    zone_id: str
    periods: tuple[ForecastPeriod, ...] = ()
    detailed_forecast: str | None = None

    def __post_init__(self) -> None:
        if self.periods and self.detailed_forecast is not None:
            raise ValueError("Forecast holds either periods or a narrative, not both")

    @property
    def has_periods(self) -> bool:
        return bool(self.periods)
