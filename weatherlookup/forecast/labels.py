"""Per-locale display strings.

Labels are plain table lookups keyed by locale code; there is no
pluralisation or formatting engine behind them.
"""

from dataclasses import dataclass

from weatherlookup.models.common import Condition, ErrorKind, Weekday


@dataclass(frozen=True)
class Labels:
    locale: str
    now: str
    today: str
    tomorrow: str
    weekdays: dict[Weekday, str]
    conditions: dict[Condition, str]
    errors: dict[ErrorKind, str]
    feels_like: str  # format: feels_like, humidity, comparison
    feels_hotter: str
    feels_colder: str
    humidity_good: str
    humidity_moderate: str
    humidity_unhealthy: str

    def weekday(self, day: Weekday) -> str:
        return self.weekdays[day]

    def condition(self, condition: Condition) -> str:
        return self.conditions[condition]

    def error(self, kind: ErrorKind, detail: str = "") -> str:
        return self.errors[kind].format(detail=detail)


EN = Labels(
    locale="en",
    now="Now",
    today="Today",
    tomorrow="Tomorrow",
    weekdays={
        Weekday.SUNDAY: "Sunday",
        Weekday.MONDAY: "Monday",
        Weekday.TUESDAY: "Tuesday",
        Weekday.WEDNESDAY: "Wednesday",
        Weekday.THURSDAY: "Thursday",
        Weekday.FRIDAY: "Friday",
        Weekday.SATURDAY: "Saturday",
    },
    conditions={
        Condition.CLEAR: "Clear",
        Condition.CLOUDS: "Cloudy",
        Condition.RAIN: "Rain",
        Condition.DRIZZLE: "Light rain",
        Condition.THUNDERSTORM: "Thunderstorm",
        Condition.SNOW: "Snow",
        Condition.MIST: "Mist",
        Condition.UNKNOWN: "Unknown",
    },
    errors={
        ErrorKind.EMPTY_QUERY: "City name must not be empty",
        ErrorKind.UNAUTHORIZED: "Invalid API key",
        ErrorKind.NOT_FOUND: "Location '{detail}' not found",
        ErrorKind.RATE_LIMITED: "Too many requests. Please try again later.",
        ErrorKind.NETWORK_UNREACHABLE: (
            "Network error: check your internet connection"
        ),
        ErrorKind.UNEXPECTED: "Unexpected error: {detail}",
    },
    feels_like="Feels like {0}° with {1}% humidity, {2}",
    feels_hotter="warmer than the actual temperature",
    feels_colder="cooler than the actual temperature",
    humidity_good="Good",
    humidity_moderate="Moderate",
    humidity_unhealthy="Unhealthy",
)

ID = Labels(
    locale="id",
    now="Sekarang",
    today="Hari ini",
    tomorrow="Besok",
    weekdays={
        Weekday.SUNDAY: "Minggu",
        Weekday.MONDAY: "Senin",
        Weekday.TUESDAY: "Selasa",
        Weekday.WEDNESDAY: "Rabu",
        Weekday.THURSDAY: "Kamis",
        Weekday.FRIDAY: "Jumat",
        Weekday.SATURDAY: "Sabtu",
    },
    conditions={
        Condition.CLEAR: "Cerah",
        Condition.CLOUDS: "Berawan",
        Condition.RAIN: "Hujan",
        Condition.DRIZZLE: "Hujan ringan",
        Condition.THUNDERSTORM: "Badai petir",
        Condition.SNOW: "Salju",
        Condition.MIST: "Berkabut",
        Condition.UNKNOWN: "Tidak diketahui",
    },
    errors={
        ErrorKind.EMPTY_QUERY: "Nama kota tidak boleh kosong",
        ErrorKind.UNAUTHORIZED: "Invalid API Key",
        ErrorKind.NOT_FOUND: "Lokasi '{detail}' tidak ditemukan",
        ErrorKind.RATE_LIMITED: (
            "Terlalu banyak requests. Silakan coba lagi nanti."
        ),
        ErrorKind.NETWORK_UNREACHABLE: (
            "Error jaringan: Periksa koneksi internet Anda"
        ),
        ErrorKind.UNEXPECTED: "Error tak terduga: {detail}",
    },
    feels_like="Terasa seperti {0}° dengan kelembapan {1}%, {2}",
    feels_hotter="lebih panas dari suhu sebenarnya",
    feels_colder="lebih sejuk dari suhu sebenarnya",
    humidity_good="Baik",
    humidity_moderate="Sedang",
    humidity_unhealthy="Tidak Sehat",
)

LABELS: dict[str, Labels] = {EN.locale: EN, ID.locale: ID}


def get_labels(locale: str) -> Labels:
    """Return the label table for ``locale``, defaulting to English."""
    return LABELS.get(locale.lower(), EN)
