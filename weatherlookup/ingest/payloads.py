"""Parse upstream JSON payloads into weather models."""

from weatherlookup.models.weather import (
    Coordinates,
    CurrentConditions,
    RawSample,
    RawSeries,
)


class PayloadError(ValueError):
    """Raised when an upstream payload does not have the expected shape."""


def parse_current(raw: dict) -> CurrentConditions:
    """Parse a current-conditions response.

    Missing fields take neutral defaults, matching how the upstream API
    omits keys rather than sending nulls.
    """
    if not isinstance(raw, dict):
        raise PayloadError(f"expected object, got {type(raw).__name__}")
    main = raw.get("main") or {}
    weather = _first(raw.get("weather"))
    coord_raw = raw.get("coord")

    try:
        coord = None
        if isinstance(coord_raw, dict) and "lat" in coord_raw and "lon" in coord_raw:
            coord = Coordinates(
                lat=float(coord_raw["lat"]), lon=float(coord_raw["lon"])
            )
        return CurrentConditions(
            place_name=str(raw.get("name", "")),
            temperature=float(main.get("temp", 0.0)),
            humidity=int(main.get("humidity", 0)),
            feels_like=float(main.get("feels_like", 0.0)),
            condition_main=str(weather.get("main", "")),
            description=str(weather.get("description", "")),
            icon=str(weather.get("icon", "")),
            coord=coord,
        )
    except (TypeError, ValueError) as e:
        raise PayloadError(f"malformed current conditions: {e}") from e


def parse_series(raw: dict) -> RawSeries:
    """Parse a forecast-series response into samples in upstream order."""
    if not isinstance(raw, dict):
        raise PayloadError(f"expected object, got {type(raw).__name__}")
    items = raw.get("list", [])
    if not isinstance(items, list):
        raise PayloadError("forecast 'list' is not an array")

    samples = []
    for item in items:
        try:
            main = item.get("main") or {}
            weather = _first(item.get("weather"))
            samples.append(
                RawSample(
                    timestamp=int(item.get("dt", 0)),
                    temp=float(main.get("temp", 0.0)),
                    temp_min=float(main.get("temp_min", 0.0)),
                    temp_max=float(main.get("temp_max", 0.0)),
                    description=str(weather.get("description", "")),
                    icon=str(weather.get("icon", "")),
                )
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise PayloadError(f"malformed forecast item: {e}") from e
    return tuple(samples)


def _first(entries) -> dict:
    if isinstance(entries, list) and entries and isinstance(entries[0], dict):
        return entries[0]
    return {}
