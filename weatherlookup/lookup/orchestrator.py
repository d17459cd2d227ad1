"""Fetch orchestrator: one current-conditions call, then one forecast-series call."""

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo

from weatherlookup.config.loader import resolve_timezone
from weatherlookup.config.schema import LookupConfig
from weatherlookup.forecast.fallback import fallback
from weatherlookup.forecast.labels import EN, Labels, get_labels
from weatherlookup.forecast.normalizer import normalize
from weatherlookup.ingest.owm_client import OpenWeatherClient
from weatherlookup.ingest.payloads import parse_current, parse_series
from weatherlookup.lookup.errors import LookupFailure, classify_error
from weatherlookup.lookup.state import LookupState, LookupStateView
from weatherlookup.models.common import ErrorKind, local_now
from weatherlookup.models.forecast import NormalizedForecast
from weatherlookup.models.lookup import LookupResult, LookupStatus
from weatherlookup.models.weather import CurrentConditions

logger = logging.getLogger(__name__)


class WeatherLookup:
    """Runs lookups against the upstream API and publishes them to a state cell.

    State moves idle -> loading -> (ready | error). A forecast-series
    failure never surfaces as an error: the fallback forecast is used and
    the lookup still reaches ready.
    """

    def __init__(
        self,
        client: OpenWeatherClient,
        labels: Labels = EN,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.client = client
        self.labels = labels
        self.tz = tz
        self._clock = clock or (lambda: local_now(self.tz))
        self._state = LookupState()
        self.state = LookupStateView(self._state)

    @classmethod
    def from_config(cls, config: LookupConfig) -> "WeatherLookup":
        client = OpenWeatherClient(
            api_key=config.api.api_key,
            base_url=config.api.base_url,
            units=config.api.units.value,
            timeout=config.api.timeout_seconds,
        )
        return cls(
            client,
            labels=get_labels(config.display.locale.value),
            tz=resolve_timezone(config),
        )

    def lookup_by_name(self, city: str) -> LookupResult:
        """Look up a place by name. Blank input fails without a network call."""
        query = (city or "").strip()
        if not query:
            message = self.labels.error(ErrorKind.EMPTY_QUERY)
            logger.warning("Rejected lookup with empty city name")
            self._state.reject(ErrorKind.EMPTY_QUERY, message)
            return self._state.snapshot()

        logger.info("Looking up weather for city=%r", query)
        return self._run(
            query,
            lambda: self.client.get_current_by_name(query),
            lambda: self.client.get_forecast_by_name(query),
        )

    def lookup_by_location(self, lat: float, lon: float) -> LookupResult:
        """Look up by caller-supplied coordinates."""
        logger.info("Looking up weather for lat=%.4f lon=%.4f", lat, lon)
        return self._run(
            f"{lat:.4f},{lon:.4f}",
            lambda: self.client.get_current_by_location(lat, lon),
            lambda: self.client.get_forecast_by_location(lat, lon),
        )

    def _run(
        self,
        query: str,
        fetch_current: Callable[[], dict],
        fetch_forecast: Callable[[], dict],
    ) -> LookupResult:
        seq = self._state.begin()

        try:
            current = parse_current(fetch_current())
            if not current.place_name:
                raise LookupFailure(ErrorKind.NOT_FOUND, query)
        except Exception as e:
            failure = classify_error(e)
            message = failure.message(self.labels, query)
            logger.error("Lookup %d for %s failed: %s", seq, query, message)
            result = LookupResult.failed(failure.kind, message, seq)
            self._state.publish(seq, result)
            return result

        logger.info(
            "Current conditions for %s: %.1f° %s",
            current.place_name, current.temperature, current.description,
        )
        forecast = self._fetch_forecast(current, fetch_forecast)

        result = LookupResult(
            status=LookupStatus.READY,
            current=current,
            hourly=forecast.hourly,
            daily=forecast.daily,
            forecast_source=forecast.source,
            sequence=seq,
        )
        self._state.publish(seq, result)
        return result

    def _fetch_forecast(
        self, current: CurrentConditions, fetch_forecast: Callable[[], dict]
    ) -> NormalizedForecast:
        """Fetch and normalize the series, or fall back to synthetic data."""
        try:
            series = parse_series(fetch_forecast())
            forecast = normalize(series, self.tz, self.labels)
        except Exception:
            logger.warning(
                "Forecast series unavailable for %s, using fallback",
                current.place_name, exc_info=True,
            )
            return fallback(current, self._clock(), self.labels)

        if forecast.is_empty:
            logger.warning(
                "Forecast series for %s was empty, using fallback",
                current.place_name,
            )
            return fallback(current, self._clock(), self.labels)

        logger.info(
            "Forecast loaded: %d hours, %d days",
            len(forecast.hourly), len(forecast.daily),
        )
        return forecast
