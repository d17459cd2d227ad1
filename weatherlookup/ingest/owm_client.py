"""OpenWeatherMap API client for current conditions and the 5-day forecast series."""

import logging

import httpx

logger = logging.getLogger(__name__)

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_USER_AGENT = "weatherlookup/0.1.0"


class OpenWeatherClient:
    """Fire-once client: no retries, non-2xx responses raise HTTPStatusError."""

    def __init__(
        self,
        api_key: str,
        base_url: str = OWM_BASE_URL,
        units: str = "metric",
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout
        self.user_agent = user_agent

    def get_current_by_name(self, city: str) -> dict:
        return self._get("weather", {"q": city})

    def get_current_by_location(self, lat: float, lon: float) -> dict:
        return self._get("weather", {"lat": lat, "lon": lon})

    def get_forecast_by_name(self, city: str) -> dict:
        return self._get("forecast", {"q": city})

    def get_forecast_by_location(self, lat: float, lon: float) -> dict:
        return self._get("forecast", {"lat": lat, "lon": lon})

    def _get(self, endpoint: str, query: dict) -> dict:
        url = f"{self.base_url}/{endpoint}"
        params = {**query, "appid": self.api_key, "units": self.units}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "OpenWeather %s returned %d for %s",
                endpoint, e.response.status_code, query,
            )
            raise
        except httpx.RequestError as e:
            logger.error("OpenWeather %s request failed: %s", endpoint, e)
            raise
