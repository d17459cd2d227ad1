"""Default location and config locations."""

from weatherlookup.config.schema import LocationConfig

DEFAULT_CONFIG_PATH = "configs/default.yaml"
API_KEY_ENV = "OPENWEATHER_API_KEY"

DEFAULT_LOCATION = LocationConfig(
    name="Surakarta",
    lat=-7.5755,
    lon=110.8243,
)
