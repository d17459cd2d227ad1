"""Output formatters for lookup results."""

import json
from dataclasses import asdict

from weatherlookup.forecast.conditions import (
    condition_from_description,
    glyph_for_condition,
)
from weatherlookup.forecast.labels import EN, Labels
from weatherlookup.models.common import ForecastSource
from weatherlookup.models.forecast import DailyPoint, HourlyPoint
from weatherlookup.models.lookup import LookupResult, LookupStatus
from weatherlookup.models.weather import CurrentConditions

HOURLY_DISPLAY_LIMIT = 12


def display_hourly(points: list[HourlyPoint]) -> list[HourlyPoint]:
    """Cap the hourly strip at the near-term display limit."""
    return points[:HOURLY_DISPLAY_LIMIT]


def localize_daily(points: list[DailyPoint], labels: Labels = EN) -> list[DailyPoint]:
    """Re-derive each day's label and glyph from its upstream description."""
    localized = []
    for p in points:
        condition = condition_from_description(p.weather)
        localized.append(
            DailyPoint(
                day=p.day,
                weather=labels.condition(condition),
                icon=glyph_for_condition(condition),
                high_temp=p.high_temp,
                low_temp=p.low_temp,
            )
        )
    return localized


def display_daily(r: LookupResult, labels: Labels = EN) -> list[DailyPoint]:
    """Daily rows for display; fallback rows already carry localized labels."""
    if r.forecast_source == ForecastSource.FALLBACK:
        return list(r.daily)
    return localize_daily(r.daily, labels)


def humidity_quality(humidity: int, labels: Labels = EN) -> str:
    if humidity <= 50:
        return labels.humidity_good
    if humidity <= 100:
        return labels.humidity_moderate
    return labels.humidity_unhealthy


def feels_like_message(current: CurrentConditions, labels: Labels = EN) -> str:
    comparison = (
        labels.feels_hotter
        if current.feels_like > current.temperature
        else labels.feels_colder
    )
    return labels.feels_like.format(
        int(current.feels_like), current.humidity, comparison
    )


def format_lookup_text(r: LookupResult, labels: Labels = EN) -> str:
    """Plain text rendering for the terminal."""
    if r.status == LookupStatus.ERROR:
        return f"Error: {r.error_message}"
    if r.status != LookupStatus.READY or r.current is None:
        return f"Status: {r.status}"

    c = r.current
    lines = [
        f"=== {c.place_name} ===",
        f"{c.temperature:.0f}° {c.description} | "
        f"Humidity {c.humidity}% ({humidity_quality(c.humidity, labels)})",
        feels_like_message(c, labels),
        "",
        "Hourly:",
    ]
    lines.append(
        "  " + " | ".join(
            f"{h.time} {h.icon} {h.temperature}°" for h in display_hourly(r.hourly)
        )
    )
    lines.append("Daily:")
    for d in display_daily(r, labels):
        lines.append(
            f"  {d.day:<12} {d.icon} {d.weather:<14} {d.high_temp}° / {d.low_temp}°"
        )
    if r.forecast_source == ForecastSource.FALLBACK:
        lines.append("(forecast estimated from current conditions)")
    return "\n".join(lines)


def format_lookup_json(r: LookupResult) -> str:
    """JSON rendering for programmatic consumption."""
    return json.dumps(lookup_to_dict(r), indent=2, ensure_ascii=False)


def format_lookup_chat(r: LookupResult, labels: Labels = EN) -> str:
    """Chat-friendly markdown rendering."""
    if r.status == LookupStatus.ERROR:
        return f"**Lookup failed**: {r.error_message}"
    if r.status != LookupStatus.READY or r.current is None:
        return f"**Status**: {r.status}"

    c = r.current
    lines = [
        f"**{c.place_name}**: {c.temperature:.0f}° {c.description}",
        f"- {feels_like_message(c, labels)}",
    ]
    for d in display_daily(r, labels):
        lines.append(f"- {d.day}: {d.icon} {d.weather}, {d.high_temp}°/{d.low_temp}°")
    if r.forecast_source == ForecastSource.FALLBACK:
        lines.append("_Forecast estimated from current conditions_")
    return "\n".join(lines)


def lookup_to_dict(r: LookupResult) -> dict:
    return {
        "status": r.status.value,
        "sequence": r.sequence,
        "current": asdict(r.current) if r.current is not None else None,
        "hourly": [asdict(h) for h in r.hourly],
        "daily": [asdict(d) for d in r.daily],
        "forecast_source": r.forecast_source.value if r.forecast_source else None,
        "error_kind": r.error_kind.value if r.error_kind else None,
        "error_message": r.error_message,
    }
