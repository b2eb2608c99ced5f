"""
Configuration module for the ClimaCell client.

Loads configuration from an optional JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


DEFAULT_CONFIG: Dict[str, Any] = {
    "api": {
        "api_key": None,
        "base_url": constants.DEFAULT_BASE_URL,
        "timelines_url": constants.DEFAULT_TIMELINES_URL,
        "timeout": constants.DEFAULT_TIMEOUT,
        "max_retries": constants.DEFAULT_MAX_RETRIES,
    },
    "request": {
        "unit_system": constants.UNIT_SYSTEM_SI,
    },
}


class Config:
    """Configuration manager for the client and the command-line demo."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'. A missing default file is not an
                        error; built-in defaults are used instead.
        """
        self._explicit_file = config_file is not None or bool(os.getenv("CONFIG_FILE"))
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = json.loads(json.dumps(DEFAULT_CONFIG))
        self._load_config()
        self._override_from_env()

    def _load_config(self) -> None:
        """Load configuration from JSON file, merged over the defaults."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit_file:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv(constants.API_KEY_ENV):
            self.config["api"]["api_key"] = os.getenv(constants.API_KEY_ENV)

        if os.getenv("CLIMACELL_BASE_URL"):
            self.config["api"]["base_url"] = os.getenv("CLIMACELL_BASE_URL")

        if os.getenv("CLIMACELL_TIMELINES_URL"):
            self.config["api"]["timelines_url"] = os.getenv("CLIMACELL_TIMELINES_URL")

        if os.getenv("CLIMACELL_UNIT_SYSTEM"):
            self.config["request"]["unit_system"] = os.getenv("CLIMACELL_UNIT_SYSTEM")

    def validate(self) -> None:
        """
        Validate the settings needed to talk to the API.

        Raises:
            ValueError: If the API key is missing or the unit system is unknown
        """
        if not self.api_key:
            raise ValueError(
                f"Missing API key: set {constants.API_KEY_ENV} or api.api_key in {self.config_file}"
            )

        if self.unit_system not in constants.UNIT_SYSTEMS:
            raise ValueError(
                f"Invalid unit system {self.unit_system!r}, "
                f"expected one of: {', '.join(constants.UNIT_SYSTEMS)}"
            )

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
    def api_key(self) -> Optional[str]:
        """Get API key."""
        return self.get("api.api_key")

    @property
    def base_url(self) -> str:
        """Get base URL of the weather endpoints."""
        return self.get("api.base_url", constants.DEFAULT_BASE_URL)

    @property
    def timelines_url(self) -> str:
        """Get base URL of the timelines endpoint."""
        return self.get("api.timelines_url", constants.DEFAULT_TIMELINES_URL)

    @property
    def timeout(self) -> int:
        """Get API timeout in seconds."""
        return self.get("api.timeout", constants.DEFAULT_TIMEOUT)

    @property
    def max_retries(self) -> int:
        """Get maximum transport retry attempts."""
        return self.get("api.max_retries", constants.DEFAULT_MAX_RETRIES)

    @property
    def unit_system(self) -> str:
        """Get requested unit system."""
        return self.get("request.unit_system", constants.UNIT_SYSTEM_SI)

    def __repr__(self) -> str:
        """String representation of config (the API key is never shown)."""
        return f"Config(file={self.config_file}, base_url={self.base_url})"
