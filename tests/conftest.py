"""Pytest configuration and fixtures for test suite."""

import pytest
from core.services.report_store import report_store


@pytest.fixture(autouse=True)
def isolated_report_store(tmp_path):
    """Point the global report store at a fresh temporary directory for each test.

    The post log goes to the same directory so tests never touch storage/.
    """
    original_path = report_store.path
    original_post_log = report_store.post_log_path

    report_store.path = tmp_path / "temp_humidity.txt"
    report_store.post_log_path = tmp_path / "post.log"

    yield report_store

    report_store.path = original_path
    report_store.post_log_path = original_post_log


@pytest.fixture
def full_payload() -> dict:
    """A complete form payload as sent by the sensor device."""
    return {
        "temperature": "23.5",
        "tempFar": "74.3",
        "timeStamp": "1700000000",
        "humidity": "61",
        "pressure": "1013.2",
        "ldr": "512",
        "maxTemp": "28.1",
        "minTemp": "14.9",
        "maxTempTimestamp": "1699950000",
        "minTempTimestamp": "1699920000",
        "minHumidity": "40",
        "maxHumidity": "82",
        "maxHumidityTimestamp": "1699925000",
        "minHumidityTimestamp": "1699955000",
        "minPressure": "1008.7",
        "maxPressure": "1019.4",
        "maxPressureTimestamp": "1699930000",
        "minPressureTimestamp": "1699960000",
        "uptime": "1699800000",
        "dewPoint": "15.6",
        "maxDewPoint": "17.2",
        "minDewPoint": "9.8",
        "maxDewPointTimestamp": "1699940000",
        "minDewPointTimestamp": "1699915000",
        "dewPointFeeling": "Comfortable",
        "sunrise": "05:47",
        "sunset": "19:35",
        "sunriseTomorrow": "05:46",
        "sunsetTomorrow": "19:36",
    }
