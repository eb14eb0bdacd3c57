"""
Sensor reading model.

A reading is one POST from the sensor device. Every value is kept as the
raw text the device sent; nothing is validated or converted here.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

# Presence of this form field marks a request as an ingest
TRIGGER_FIELD = "temperature"

# Form field name -> attribute name
FORM_FIELDS = {
    "temperature": "temperature",
    "tempFar": "temp_far",
    "timeStamp": "timestamp",
    "humidity": "humidity",
    "pressure": "pressure",
    "ldr": "ldr",
    "maxTemp": "max_temp",
    "minTemp": "min_temp",
    "maxTempTimestamp": "max_temp_timestamp",
    "minTempTimestamp": "min_temp_timestamp",
    "minHumidity": "min_humidity",
    "maxHumidity": "max_humidity",
    "maxHumidityTimestamp": "max_humidity_timestamp",
    "minHumidityTimestamp": "min_humidity_timestamp",
    "minPressure": "min_pressure",
    "maxPressure": "max_pressure",
    "maxPressureTimestamp": "max_pressure_timestamp",
    "minPressureTimestamp": "min_pressure_timestamp",
    "uptime": "uptime",
    "dewPoint": "dew_point",
    "maxDewPoint": "max_dew_point",
    "minDewPoint": "min_dew_point",
    "maxDewPointTimestamp": "max_dew_point_timestamp",
    "minDewPointTimestamp": "min_dew_point_timestamp",
    "dewPointFeeling": "dew_point_feeling",
    "sunrise": "sunrise",
    "sunset": "sunset",
    "sunriseTomorrow": "sunrise_tomorrow",
    "sunsetTomorrow": "sunset_tomorrow",
}


def form_value(form: Mapping[str, Any], name: str) -> str:
    """Look up a form field, returning an empty string when it is absent."""
    value = form.get(name)
    if value is None:
        return ""
    return str(value)


@dataclass
class SensorReading:
    temperature: str = ""
    temp_far: str = ""
    timestamp: str = ""
    humidity: str = ""
    pressure: str = ""
    ldr: str = ""
    max_temp: str = ""
    min_temp: str = ""
    max_temp_timestamp: str = ""
    min_temp_timestamp: str = ""
    min_humidity: str = ""
    max_humidity: str = ""
    max_humidity_timestamp: str = ""
    min_humidity_timestamp: str = ""
    min_pressure: str = ""
    max_pressure: str = ""
    max_pressure_timestamp: str = ""
    min_pressure_timestamp: str = ""
    uptime: str = ""
    dew_point: str = ""
    max_dew_point: str = ""
    min_dew_point: str = ""
    max_dew_point_timestamp: str = ""
    min_dew_point_timestamp: str = ""
    dew_point_feeling: str = ""
    sunrise: str = ""
    sunset: str = ""
    sunrise_tomorrow: str = ""
    sunset_tomorrow: str = ""

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "SensorReading":
        """Build a reading from posted form fields. Missing fields become ''."""
        return cls(**{attr: form_value(form, name) for name, attr in FORM_FIELDS.items()})

    def missing_fields(self) -> list[str]:
        """Form names of the fields that came through empty."""
        attr_to_name = {attr: name for name, attr in FORM_FIELDS.items()}
        return [attr_to_name[f.name] for f in fields(self) if getattr(self, f.name) == ""]
