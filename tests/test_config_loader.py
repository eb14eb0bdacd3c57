import json
from zoneinfo import ZoneInfo

import pytest
from core.config_loader import PROJECT_ROOT, config_loader


@pytest.fixture
def station_config_file(tmp_path, monkeypatch):
    """Write a station config to a temp file, point STATION_CONFIG at it, restore afterwards."""
    path = tmp_path / "station_config.json"
    monkeypatch.setenv("STATION_CONFIG", str(path))
    yield path
    monkeypatch.delenv("STATION_CONFIG")
    config_loader.reload_config()


class TestConfigLoader:
    """Test configuration loading and access."""

    def test_config_loads(self):
        config = config_loader.get_config()
        assert config is not None
        assert config.timezone == "Australia/Sydney"
        assert config.refreshSeconds == 30

    def test_timezone(self):
        assert config_loader.get_timezone() == ZoneInfo("Australia/Sydney")

    def test_relative_paths_resolve_to_project_root(self):
        assert config_loader.get_report_path() == PROJECT_ROOT / "storage" / "temp_humidity.txt"

    def test_config_singleton(self):
        from core.config_loader import ConfigLoader
        assert ConfigLoader() is config_loader

    def test_load_custom_file(self, station_config_file, tmp_path):
        station_config_file.write_text(json.dumps({
            "timezone": "Europe/London",
            "local_label": "London",
            "refresh_seconds": 60,
            "report_file": str(tmp_path / "report.txt"),
            "post_log_file": None,
        }))
        config_loader.reload_config()

        config = config_loader.get_config()
        assert config.timezone == "Europe/London"
        assert config.localLabel == "London"
        assert config.refreshSeconds == 60
        assert config_loader.get_report_path() == tmp_path / "report.txt"
        assert config_loader.get_post_log_path() is None
        # untouched keys keep their defaults
        assert config.site == "Garage/Nerd Grotto"

    def test_missing_file_uses_defaults(self, station_config_file):
        config_loader.reload_config()
        assert config_loader.get_config().timezone == "Australia/Sydney"

    def test_malformed_file_uses_defaults(self, station_config_file):
        station_config_file.write_text("{not json")
        config_loader.reload_config()
        assert config_loader.get_config().refreshSeconds == 30

    def test_unknown_timezone_falls_back(self, station_config_file):
        station_config_file.write_text(json.dumps({"timezone": "Mars/Olympus_Mons", "site": "Shed"}))
        config_loader.reload_config()
        config = config_loader.get_config()
        assert config.timezone == "Australia/Sydney"
        assert config.site == "Shed"

    def test_null_timezone_falls_back(self, station_config_file):
        station_config_file.write_text(json.dumps({"timezone": None}))
        config_loader.reload_config()
        assert config_loader.get_config().timezone == "Australia/Sydney"
        assert config_loader.get_timezone() == ZoneInfo("Australia/Sydney")

    def test_null_report_file_falls_back(self, station_config_file):
        from core.services.report_store import create_report_store

        station_config_file.write_text(json.dumps({"report_file": None}))
        config_loader.reload_config()
        assert config_loader.get_report_path() == PROJECT_ROOT / "storage" / "temp_humidity.txt"
        store = create_report_store()
        assert store.path == PROJECT_ROOT / "storage" / "temp_humidity.txt"

    def test_wrong_typed_values_fall_back_per_key(self, station_config_file):
        station_config_file.write_text(json.dumps({
            "timezone": 10,
            "refresh_seconds": "fast",
            "post_log_file": ["post.log"],
            "escape_report": "yes",
            "site": "Shed",
        }))
        config_loader.reload_config()
        config = config_loader.get_config()
        assert config.timezone == "Australia/Sydney"
        assert config.refreshSeconds == 30
        assert config.postLogFile == "storage/post.log"
        assert config.escapeReport is False
        assert config.site == "Shed"

    def test_null_post_log_disables_it(self, station_config_file):
        station_config_file.write_text(json.dumps({"post_log_file": None}))
        config_loader.reload_config()
        assert config_loader.get_post_log_path() is None

    def test_non_object_file_uses_defaults(self, station_config_file):
        station_config_file.write_text("[1, 2, 3]")
        config_loader.reload_config()
        assert config_loader.get_config().refreshSeconds == 30

    def test_escape_report_flag(self, station_config_file):
        station_config_file.write_text(json.dumps({"escape_report": True}))
        config_loader.reload_config()
        assert config_loader.get_config().escapeReport is True
