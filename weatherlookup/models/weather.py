"""Upstream weather data models: current conditions and raw forecast samples."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True)
class CurrentConditions:
    place_name: str
    temperature: float
    humidity: int
    feels_like: float
    condition_main: str  # upstream category name, e.g. "Clouds"
    description: str
    icon: str
    coord: Coordinates | None = None


@dataclass(frozen=True)
class RawSample:
    timestamp: int  # Unix seconds
    temp: float
    temp_min: float
    temp_max: float
    description: str = ""
    icon: str = ""


RawSeries = tuple[RawSample, ...]
