"""Forecast normalizer: fixed-interval samples to hourly and daily display lists."""

import logging
from datetime import datetime, tzinfo

from weatherlookup.forecast.conditions import glyph_for_icon
from weatherlookup.forecast.labels import EN, Labels
from weatherlookup.models.common import Condition, ForecastSource, Weekday
from weatherlookup.models.forecast import DailyPoint, HourlyPoint, NormalizedForecast
from weatherlookup.models.weather import RawSample, RawSeries

logger = logging.getLogger(__name__)

HOURLY_LIMIT = 5
DAILY_LIMIT = 7
DATE_KEY_FORMAT = "%Y-%m-%d"
TIME_LABEL_FORMAT = "%H.%M"


def normalize(
    series: RawSeries,
    tz: tzinfo | None = None,
    labels: Labels = EN,
) -> NormalizedForecast:
    """Convert a raw forecast series into hourly and daily display lists.

    ``tz`` selects the zone used for time labels and calendar-day grouping;
    None means the system default zone. An empty series yields empty lists.
    """
    hourly = extract_hourly(series, tz, labels)
    daily = extract_daily(series, tz, labels)
    logger.debug(
        "Normalized %d samples into %d hourly, %d daily",
        len(series), len(hourly), len(daily),
    )
    return NormalizedForecast(
        hourly=hourly, daily=daily, source=ForecastSource.UPSTREAM
    )


def extract_hourly(
    series: RawSeries, tz: tzinfo | None = None, labels: Labels = EN
) -> list[HourlyPoint]:
    points = []
    for index, sample in enumerate(series[:HOURLY_LIMIT]):
        time_label = (
            labels.now if index == 0 else format_time(sample.timestamp, tz)
        )
        points.append(
            HourlyPoint(
                time=time_label,
                temperature=int(sample.temp),
                icon=glyph_for_icon(sample.icon),
            )
        )
    return points


def extract_daily(
    series: RawSeries, tz: tzinfo | None = None, labels: Labels = EN
) -> list[DailyPoint]:
    groups = group_by_date(series, tz)
    points = []
    for index, (date_key, members) in enumerate(list(groups.items())[:DAILY_LIMIT]):
        first = members[0]
        points.append(
            DailyPoint(
                day=labels.today if index == 0 else format_day(date_key, labels),
                weather=first.description or labels.condition(Condition.UNKNOWN),
                icon=glyph_for_icon(first.icon),
                high_temp=int(max(s.temp_max for s in members)),
                low_temp=int(min(s.temp_min for s in members)),
            )
        )
    return points


def group_by_date(
    series: RawSeries, tz: tzinfo | None = None
) -> dict[str, list[RawSample]]:
    """Bucket samples by local calendar date, keeping first-seen order."""
    groups: dict[str, list[RawSample]] = {}
    for sample in series:
        key = _local_time(sample.timestamp, tz).strftime(DATE_KEY_FORMAT)
        groups.setdefault(key, []).append(sample)
    return groups


def format_time(timestamp: int, tz: tzinfo | None = None) -> str:
    """Format a Unix timestamp as a zero-padded 24-hour "HH.mm" label."""
    return _local_time(timestamp, tz).strftime(TIME_LABEL_FORMAT)


def format_day(date_key: str, labels: Labels = EN) -> str:
    """Weekday name for a YYYY-MM-DD key; unparseable keys read as today."""
    try:
        day = datetime.strptime(date_key, DATE_KEY_FORMAT).date()
    except (ValueError, TypeError):
        logger.warning("Unparseable date key %r, labelling as today", date_key)
        return labels.today
    return labels.weekday(Weekday.from_date(day))


def _local_time(timestamp: int, tz: tzinfo | None) -> datetime:
    # tz=None gives naive local time in the system zone
    return datetime.fromtimestamp(timestamp, tz)
