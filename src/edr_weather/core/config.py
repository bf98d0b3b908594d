"""
Configuration module for the EDR weather client.

Loads configuration from built-in defaults, an optional JSON file and environment variables.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

import pytz

from . import constants


DEFAULT_CONFIG: Dict[str, Any] = {
    "api": {
        "base_url": constants.DEFAULT_BASE_URL,
        "timeout_ms": constants.DEFAULT_TIMEOUT_MS,
        "max_retries": constants.DEFAULT_MAX_RETRIES,
        "verify_ssl": True,
    },
    "collections": {
        "forecast": constants.DEFAULT_COLLECTION,
        "observations": constants.OBSERVATION_COLLECTION,
    },
    "display": {
        "timezone": constants.DEFAULT_DISPLAY_TIMEZONE,
        "forecast_days": constants.DEFAULT_FORECAST_DAYS,
    },
    "fetch": {
        "workers": constants.DEFAULT_FETCH_WORKERS,
        "quick_load_timeout_ms": constants.QUICK_LOAD_TIMEOUT_MS,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or 'config.json' when present. An explicitly named file must exist.
        """
        self._explicit = config_file is not None or os.getenv("CONFIG_FILE") is not None
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = _merge(self.config, json.load(f))

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("EDR_BASE_URL"):
            self.config["api"]["base_url"] = os.getenv("EDR_BASE_URL")

        if os.getenv("EDR_TIMEOUT_MS"):
            self.config["api"]["timeout_ms"] = int(os.getenv("EDR_TIMEOUT_MS", "0"))

        if os.getenv("EDR_COLLECTION"):
            self.config["collections"]["forecast"] = os.getenv("EDR_COLLECTION")

        if os.getenv("DISPLAY_TIMEZONE"):
            self.config["display"]["timezone"] = os.getenv("DISPLAY_TIMEZONE")

    def _validate_config(self) -> None:
        """Validate configuration values."""
        errors = []

        if not self.get("api.base_url"):
            errors.append("api.base_url must not be empty")

        timeout_ms = self.get("api.timeout_ms")
        if timeout_ms is not None and timeout_ms <= 0:
            errors.append(f"api.timeout_ms must be positive, got {timeout_ms}")

        if self.get("api.max_retries", 0) < 0:
            errors.append("api.max_retries must be >= 0")

        if self.get("fetch.workers", 1) < 1:
            errors.append("fetch.workers must be >= 1")

        timezone = self.get("display.timezone")
        try:
            pytz.timezone(timezone)
        except pytz.exceptions.UnknownTimeZoneError:
            errors.append(f"Unknown display.timezone: {timezone}")

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def api_base_url(self) -> str:
        """Get API base URL."""
        return self.get("api.base_url", constants.DEFAULT_BASE_URL)

    @property
    def api_timeout_ms(self) -> Optional[int]:
        """Get API timeout in milliseconds (None means no timeout)."""
        return self.get("api.timeout_ms")

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", constants.DEFAULT_MAX_RETRIES)

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("api.verify_ssl", True)

    @property
    def default_collection(self) -> str:
        """Get forecast collection ID."""
        return self.get("collections.forecast", constants.DEFAULT_COLLECTION)

    @property
    def observation_collection(self) -> str:
        """Get observation collection ID."""
        return self.get("collections.observations", constants.OBSERVATION_COLLECTION)

    @property
    def display_timezone(self) -> str:
        """Get timezone used for display labels."""
        return self.get("display.timezone", constants.DEFAULT_DISPLAY_TIMEZONE)

    @property
    def forecast_days(self) -> int:
        """Get number of days shown by the daily forecast."""
        return self.get("display.forecast_days", constants.DEFAULT_FORECAST_DAYS)

    @property
    def fetch_workers(self) -> int:
        """Get worker count for concurrent fetches."""
        return self.get("fetch.workers", constants.DEFAULT_FETCH_WORKERS)

    @property
    def quick_load_timeout_ms(self) -> int:
        """Get timeout used by the default-city quick load."""
        return self.get("fetch.quick_load_timeout_ms", constants.QUICK_LOAD_TIMEOUT_MS)

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, base_url={self.api_base_url})"
