"""Condition mapping: upstream icon tokens and descriptions to glyphs and categories.

Two independent paths share the Condition enumeration. Icon tokens are
authoritative when present; description keywords cover synthesized data
that carries no token.
"""

from weatherlookup.forecast.labels import EN, Labels
from weatherlookup.models.common import Condition

GLYPH_CLEAR = "☀️"  # sun
GLYPH_PARTLY_CLOUDY = "⛅"  # sun behind cloud
GLYPH_CLOUDS = "☁️"  # cloud
GLYPH_RAIN = "🌧️"  # cloud with rain
GLYPH_DRIZZLE = "🌦️"  # sun behind rain cloud
GLYPH_THUNDERSTORM = "⛈️"  # cloud with lightning and rain
GLYPH_SNOW = "❄️"  # snowflake
GLYPH_MIST = "🌫️"  # fog

DEFAULT_GLYPH = GLYPH_PARTLY_CLOUDY

ICON_GLYPHS: dict[str, str] = {
    "01d": GLYPH_CLEAR,
    "01n": GLYPH_CLEAR,
    "02d": GLYPH_PARTLY_CLOUDY,
    "02n": GLYPH_PARTLY_CLOUDY,
    "03d": GLYPH_CLOUDS,
    "03n": GLYPH_CLOUDS,
    "04d": GLYPH_CLOUDS,
    "04n": GLYPH_CLOUDS,
    "09d": GLYPH_RAIN,
    "09n": GLYPH_RAIN,
    "10d": GLYPH_RAIN,
    "10n": GLYPH_RAIN,
    "11d": GLYPH_THUNDERSTORM,
    "11n": GLYPH_THUNDERSTORM,
    "13d": GLYPH_SNOW,
    "13n": GLYPH_SNOW,
    "50d": GLYPH_MIST,
    "50n": GLYPH_MIST,
}

CONDITION_GLYPHS: dict[Condition, str] = {
    Condition.CLEAR: GLYPH_CLEAR,
    Condition.CLOUDS: GLYPH_CLOUDS,
    Condition.RAIN: GLYPH_RAIN,
    Condition.DRIZZLE: GLYPH_DRIZZLE,
    Condition.THUNDERSTORM: GLYPH_THUNDERSTORM,
    Condition.SNOW: GLYPH_SNOW,
    Condition.MIST: GLYPH_MIST,
    Condition.UNKNOWN: DEFAULT_GLYPH,
}

# Priority order matters: first keyword hit wins
DESCRIPTION_KEYWORDS: list[tuple[tuple[str, ...], Condition]] = [
    (("clear",), Condition.CLEAR),
    (("cloud",), Condition.CLOUDS),
    (("rain",), Condition.RAIN),
    (("drizzle",), Condition.DRIZZLE),
    (("thunder",), Condition.THUNDERSTORM),
    (("snow",), Condition.SNOW),
    (("mist", "fog", "haze"), Condition.MIST),
]

# Upstream "main" names that render as mist
_MIST_MAINS = {"mist", "fog", "haze", "smoke", "dust", "sand", "ash"}


def glyph_for_icon(token: str) -> str:
    """Map an upstream icon token such as "10n" to a glyph."""
    return ICON_GLYPHS.get(token, DEFAULT_GLYPH)


def condition_from_description(description: str) -> Condition:
    """Classify free text by case-insensitive keyword match."""
    text = description.lower()
    for keywords, condition in DESCRIPTION_KEYWORDS:
        if any(k in text for k in keywords):
            return condition
    return Condition.UNKNOWN


def condition_from_main(main: str) -> Condition:
    """Classify the upstream "main" category name, e.g. "Clouds"."""
    name = main.strip().lower()
    if name in _MIST_MAINS:
        return Condition.MIST
    try:
        return Condition(name)
    except ValueError:
        return Condition.UNKNOWN


def glyph_for_condition(condition: Condition) -> str:
    return CONDITION_GLYPHS[condition]


def label_for_condition(condition: Condition, labels: Labels = EN) -> str:
    return labels.condition(condition)
