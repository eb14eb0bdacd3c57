import json
import logging
import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core.models.station_config import stationConfigData

logger = logging.getLogger(__name__)

# Project root (config_loader.py -> core -> src -> project_root)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class ConfigLoader:
    """Loads and manages station configuration from JSON file."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._instance._config = stationConfigData()
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._get_default_config()
            self.load_config()
            self._initialized = True

    @staticmethod
    def get_config_path() -> Path:
        """Get the path to the station_config.json file (STATION_CONFIG overrides it)."""
        override = os.getenv("STATION_CONFIG")
        if override:
            return Path(override)
        return PROJECT_ROOT / "config" / "station_config.json"

    def load_config(self):
        """Load configuration from JSON file."""
        config_path = self.get_config_path()

        # Start from defaults so a bad file never leaves a half-built config
        self._config = self._get_default_config()

        if not config_path.exists():
            logger.error(f"Configuration file not found: {config_path}")
            return

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                json_data = json.load(f)
            if not isinstance(json_data, dict):
                raise ValueError(f"expected a JSON object, got {type(json_data).__name__}")
            defaults = self._config

            def get_str(key: str, default: str) -> str:
                value = json_data.get(key, default)
                if not isinstance(value, str) or not value:
                    logger.warning(f"Invalid value for '{key}': {value!r}, using default {default!r}")
                    return default
                return value

            refresh = json_data.get("refresh_seconds", defaults.refreshSeconds)
            if isinstance(refresh, bool) or not isinstance(refresh, int) or refresh <= 0:
                logger.warning(f"Invalid value for 'refresh_seconds': {refresh!r}, using default {defaults.refreshSeconds}")
                refresh = defaults.refreshSeconds

            # null disables the post log
            post_log = json_data.get("post_log_file", defaults.postLogFile)
            if post_log is not None and not isinstance(post_log, str):
                logger.warning(f"Invalid value for 'post_log_file': {post_log!r}, using default {defaults.postLogFile!r}")
                post_log = defaults.postLogFile

            escape = json_data.get("escape_report", defaults.escapeReport)
            if not isinstance(escape, bool):
                logger.warning(f"Invalid value for 'escape_report': {escape!r}, using default {defaults.escapeReport}")
                escape = defaults.escapeReport

            self._config = stationConfigData(
                timezone=get_str("timezone", defaults.timezone),
                localLabel=get_str("local_label", defaults.localLabel),
                title=get_str("title", defaults.title),
                location=get_str("location", defaults.location),
                site=get_str("site", defaults.site),
                refreshSeconds=refresh,
                reportFile=get_str("report_file", defaults.reportFile),
                postLogFile=post_log or None,
                dstNote=get_str("dst_note", defaults.dstNote),
                escapeReport=escape,
            )
            logger.info(f"Configuration loaded from {config_path}")

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse configuration file: {e}")
            self._config = self._get_default_config()
            return

        except Exception as e:
            logger.error(f"Unexpected error loading configuration: {e}")
            self._config = self._get_default_config()
            return

        try:
            ZoneInfo(self._config.timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError):
            fallback = self._get_default_config().timezone
            logger.error(f"Unknown timezone '{self._config.timezone}', falling back to {fallback}")
            self._config.timezone = fallback

    @staticmethod
    def _get_default_config() -> stationConfigData:
        """Return default configuration."""
        return stationConfigData()

    @staticmethod
    def resolve_path(path: str) -> Path:
        """Resolve a configured path; relative paths are taken from the project root."""
        p = Path(path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p

    def get_config(self) -> stationConfigData:
        return self._config

    def get_timezone(self) -> ZoneInfo:
        """Get the local timezone used to render timestamps."""
        return ZoneInfo(self._config.timezone)

    def get_report_path(self) -> Path:
        return self.resolve_path(self._config.reportFile)

    def get_post_log_path(self) -> Path | None:
        """Get the diagnostic post log path, or None when disabled."""
        if not self._config.postLogFile:
            return None
        return self.resolve_path(self._config.postLogFile)

    def reload_config(self):
        """Reload configuration from file."""
        self.load_config()
        logger.info("Configuration reloaded")


# Global singleton instance
config_loader = ConfigLoader()
