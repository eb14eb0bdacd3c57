import datetime
import logging
from zoneinfo import ZoneInfo

from core.models.sensor_reading import SensorReading

logger = logging.getLogger(__name__)

UTC = datetime.timezone.utc

# Width of the label column, "Approx. Dew Point: " is the longest label
LABEL_WIDTH = 19


def format_timestamp(value: str, tz: datetime.tzinfo) -> str:
    """Render epoch seconds as 'H:i:s j-Mon-Year (Day)' in the given zone.

    Returns an empty string when the value is missing or not a number.
    """
    if value is None or str(value).strip() == "":
        return ""
    try:
        seconds = int(float(value))
        dt = datetime.datetime.fromtimestamp(seconds, tz=tz)
    except (ValueError, OverflowError, OSError) as e:
        logger.debug(f"Cannot render timestamp {value!r}: {e}")
        return ""
    # Day of month without zero padding
    return f"{dt:%H:%M:%S} {dt.day}-{dt:%b-%Y} ({dt:%a})"


def _line(label: str, text: str) -> str:
    return f"{label:<{LABEL_WIDTH - 1}} {text}\n"


class ReportFormatter:
    """Composes the fixed-layout snapshot report from one sensor reading."""

    def __init__(self, tz: ZoneInfo, local_label: str = "Sydney"):
        self.tz = tz
        self.local_label = local_label

    def local(self, value: str) -> str:
        return format_timestamp(value, self.tz)

    def build(self, r: SensorReading) -> str:
        local = self.local
        return "".join([
            _line(f"{self.local_label} time:", local(r.timestamp)),
            _line("UTC time:", format_timestamp(r.timestamp, UTC)),
            "\n",
            _line("Sunrise today:", r.sunrise),
            _line("Sunset today:", r.sunset),
            _line("Sunrise tomorrow:", r.sunrise_tomorrow),
            _line("Sunset tomorrow:", r.sunset_tomorrow),
            "\n",
            _line("Temperature:", f"{r.temperature}°C, {r.temp_far}°F"),
            _line("Max. Temperature:", f"{r.max_temp}°C @ {local(r.max_temp_timestamp)}"),
            _line("Min. Temperature:", f"{r.min_temp}°C @ {local(r.min_temp_timestamp)}"),
            "\n",
            _line("Humidity:", f"{r.humidity}%"),
            _line("Max. Humidity:", f"{r.max_humidity}% @ {local(r.max_humidity_timestamp)}"),
            _line("Min. Humidity:", f"{r.min_humidity}% @ {local(r.min_humidity_timestamp)}"),
            "\n",
            _line("Approx. Dew Point:", f"{r.dew_point}°C {r.dew_point_feeling}"),
            _line("Max. Dew Point:", f"{r.max_dew_point}°C @ {local(r.max_dew_point_timestamp)}"),
            _line("Min. Dew Point:", f"{r.min_dew_point}°C @ {local(r.min_dew_point_timestamp)}"),
            "\n",
            _line("Pressure:", f"{r.pressure}hPa"),
            _line("Max. Pressure:", f"{r.max_pressure}hPa @ {local(r.max_pressure_timestamp)}"),
            _line("Min. Pressure:", f"{r.min_pressure}hPa @ {local(r.min_pressure_timestamp)}"),
            "\n",
            _line("Ambient Light:", f"{r.ldr}/1023"),
            _line("Arduino Restart:", local(r.uptime)),
        ])
