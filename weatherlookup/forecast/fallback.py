"""Fallback forecast: deterministic synthetic lists derived from current conditions.

Used only as a last-resort display aid when the forecast series is
unavailable. Results are tagged ForecastSource.FALLBACK so callers can tell
them apart from upstream data.
"""

import logging
from datetime import datetime, timedelta

from weatherlookup.forecast.conditions import (
    condition_from_description,
    condition_from_main,
    glyph_for_condition,
)
from weatherlookup.forecast.labels import EN, Labels
from weatherlookup.models.common import Condition, ForecastSource, Weekday, local_now
from weatherlookup.models.forecast import DailyPoint, HourlyPoint, NormalizedForecast
from weatherlookup.models.weather import CurrentConditions

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 29
DEFAULT_CONDITION = Condition.CLOUDS

# (temperature offset, condition) for the hours after "now"
HOURLY_PATTERN: list[tuple[int, Condition]] = [
    (1, Condition.DRIZZLE),
    (1, Condition.DRIZZLE),
    (1, Condition.CLEAR),
    (0, Condition.CLEAR),
]

# (high offset, low offset) per synthetic day, day 1 first
DAILY_OFFSETS: list[tuple[int, int]] = [
    (2, -6),
    (3, -5),
    (1, -4),
    (2, -5),
    (3, -4),
    (0, -6),
    (2, -5),
]

# Conditions for days 2..7; day 1 reuses the current condition
DAILY_ROTATION: list[Condition] = [
    Condition.CLEAR,
    Condition.DRIZZLE,
    Condition.CLOUDS,
    Condition.CLEAR,
    Condition.RAIN,
    Condition.CLEAR,
]


def fallback(
    current: CurrentConditions | None,
    now: datetime | None = None,
    labels: Labels = EN,
) -> NormalizedForecast:
    """Build a synthetic hourly and daily forecast from a current snapshot."""
    if now is None:
        now = local_now()
    temp = int(current.temperature) if current is not None else DEFAULT_TEMPERATURE
    condition = current_condition(current)

    logger.info(
        "Generating fallback forecast from temp=%d condition=%s", temp, condition
    )
    return NormalizedForecast(
        hourly=_fallback_hourly(temp, condition, now, labels),
        daily=_fallback_daily(temp, condition, now, labels),
        source=ForecastSource.FALLBACK,
    )


def current_condition(current: CurrentConditions | None) -> Condition:
    """Resolve the category of a snapshot: "main" first, then description."""
    if current is None:
        return DEFAULT_CONDITION
    condition = condition_from_main(current.condition_main)
    if condition == Condition.UNKNOWN:
        condition = condition_from_description(current.description)
    return condition


def _fallback_hourly(
    temp: int, condition: Condition, now: datetime, labels: Labels
) -> list[HourlyPoint]:
    hourly = [HourlyPoint(labels.now, temp, glyph_for_condition(condition))]
    top_of_hour = now.replace(minute=0, second=0, microsecond=0)
    for hours_ahead, (offset, cond) in enumerate(HOURLY_PATTERN, start=1):
        at = top_of_hour + timedelta(hours=hours_ahead)
        hourly.append(
            HourlyPoint(at.strftime("%H.%M"), temp + offset, glyph_for_condition(cond))
        )
    return hourly


def _fallback_daily(
    temp: int, condition: Condition, now: datetime, labels: Labels
) -> list[DailyPoint]:
    conditions = [condition, *DAILY_ROTATION]
    daily = []
    for index, ((high, low), cond) in enumerate(zip(DAILY_OFFSETS, conditions)):
        daily.append(
            DailyPoint(
                day=_day_label(index, now, labels),
                weather=labels.condition(cond),
                icon=glyph_for_condition(cond),
                high_temp=temp + high,
                low_temp=temp + low,
            )
        )
    return daily


def _day_label(index: int, now: datetime, labels: Labels) -> str:
    if index == 0:
        return labels.today
    if index == 1:
        return labels.tomorrow
    return labels.weekday(Weekday.from_date(now + timedelta(days=index)))
