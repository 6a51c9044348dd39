"""
Configuration utilities for the tax address normalizer.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv


class Config:
    """Configuration manager for the tax address project."""

    def __init__(self, env_file: Optional[str] = None) -> None:
        """Initialize configuration.

        If an env_file path is provided, load environment variables from it.
        Otherwise, do not auto-load a .env file to keep defaults predictable.
        """
        self.env_file = env_file
        self._load_environment()
        self._config = self._load_config()

    def _load_environment(self) -> None:
        """Load environment variables from explicit .env file if provided."""
        if not self.env_file:
            return
        env_path = Path(self.env_file)
        if env_path.exists():
            load_dotenv(env_path)

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        return {
            # Core settings
            "log_level": self._get_str("LOG_LEVEL", default="INFO"),
            # MongoDB country directory
            "mongo_url": self._get_str("DB_CONNECTION_URL", default=""),
            "mongo_db": self._get_str("DB_NAME", default="TAX_DIRECTORY"),
            "countries_collection": self._get_str("COUNTRY_COLLECTION_NAME", default="DIRECTORY_COUNTRY"),
            # Scope the field limits below apply to
            "scope_code": self._get_str("SCOPE_CODE", default="default"),
            "scope_type": self._get_str("SCOPE_TYPE", default="store"),
            # Tax provider field limits
            "street_max_length": self._get_int("STREET_MAX_LENGTH", default=100),
            "city_max_length": self._get_int("CITY_MAX_LENGTH", default=60),
            "main_division_max_length": self._get_int("MAIN_DIVISION_MAX_LENGTH", default=60),
            "postal_code_max_length": self._get_int("POSTAL_CODE_MAX_LENGTH", default=20),
            "country_max_length": self._get_int("COUNTRY_MAX_LENGTH", default=3),
        }

    def _get_str(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        if self.env_file is None:
            return default
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value."""
        if self.env_file is None:
            return default
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Get configuration value using bracket notation."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if configuration key exists."""
        return key in self._config
