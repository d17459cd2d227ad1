"""Builders shared by tests."""

from datetime import datetime

from weatherlookup.models.weather import RawSample


def make_sample(
    when: datetime,
    temp: float = 25.0,
    temp_min: float | None = None,
    temp_max: float | None = None,
    description: str = "clear sky",
    icon: str = "01d",
) -> RawSample:
    return RawSample(
        timestamp=int(when.timestamp()),
        temp=temp,
        temp_min=temp if temp_min is None else temp_min,
        temp_max=temp if temp_max is None else temp_max,
        description=description,
        icon=icon,
    )
