"""Display-ready forecast models produced by the normalizer and fallback."""

from dataclasses import dataclass, field

from weatherlookup.models.common import ForecastSource


@dataclass(frozen=True)
class HourlyPoint:
    time: str
    temperature: int
    icon: str


@dataclass(frozen=True)
class DailyPoint:
    day: str
    weather: str
    icon: str
    high_temp: int
    low_temp: int


@dataclass(frozen=True)
class NormalizedForecast:
    hourly: list[HourlyPoint] = field(default_factory=list)
    daily: list[DailyPoint] = field(default_factory=list)
    source: ForecastSource = ForecastSource.UPSTREAM

    @property
    def is_empty(self) -> bool:
        return not self.hourly and not self.daily
