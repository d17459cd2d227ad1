"""Lookup state models."""

from dataclasses import dataclass, field
from enum import StrEnum

from weatherlookup.models.common import ErrorKind, ForecastSource
from weatherlookup.models.forecast import DailyPoint, HourlyPoint
from weatherlookup.models.weather import CurrentConditions


class LookupStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass(frozen=True)
class LookupResult:
    status: LookupStatus = LookupStatus.IDLE
    current: CurrentConditions | None = None
    hourly: list[HourlyPoint] = field(default_factory=list)
    daily: list[DailyPoint] = field(default_factory=list)
    forecast_source: ForecastSource | None = None
    error_kind: ErrorKind | None = None
    error_message: str | None = None
    sequence: int = 0

    @classmethod
    def loading(cls, sequence: int) -> "LookupResult":
        return cls(status=LookupStatus.LOADING, sequence=sequence)

    @classmethod
    def failed(
        cls, kind: ErrorKind, message: str, sequence: int = 0
    ) -> "LookupResult":
        return cls(
            status=LookupStatus.ERROR,
            error_kind=kind,
            error_message=message,
            sequence=sequence,
        )

    @property
    def is_ready(self) -> bool:
        return self.status == LookupStatus.READY
