"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class Units(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"


class Locale(StrEnum):
    EN = "en"
    ID = "id"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org/data/2.5"
    api_key: str = ""
    units: Units = Units.METRIC
    timeout_seconds: float = Field(default=10.0, gt=0.0, le=120.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    locale: Locale = Locale.EN
    timezone: str = ""  # IANA name; empty means system default

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        if v:
            try:
                ZoneInfo(v)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ValueError(f"Unknown timezone: {v}") from e
        return v


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class LookupConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    default_location: LocationConfig | None = None
