#!/usr/bin/env python3
"""
Configuration Management for the CSV Split Poster

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production); the access
token is only ever read here and handed to the YNAB client explicitly.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_CSV_PATH = "transactions.csv"
DEFAULT_YNAB_BASE_URL = "https://api.ynab.com/v1"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class YnabConfig:
    """YNAB API configuration."""

    api_token: str | None = None
    base_url: str = DEFAULT_YNAB_BASE_URL
    timeout: int = 30


@dataclass
class ImportConfig:
    """CSV import configuration."""

    csv_path: Path


@dataclass
class Config:
    """
    Main configuration class for the split poster.

    Loads configuration from environment variables with secure defaults
    and validation for each environment type.
    """

    environment: Environment
    ynab: YnabConfig
    csv_import: ImportConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        try:
            env = Environment(os.getenv("CSVSPLIT_ENV", "development"))
        except ValueError as e:
            raise ConfigurationError(f"Unknown CSVSPLIT_ENV: {os.getenv('CSVSPLIT_ENV')}") from e

        try:
            timeout = int(os.getenv("YNAB_TIMEOUT", "30"))
        except ValueError as e:
            raise ConfigurationError(f"YNAB_TIMEOUT must be an integer: {os.getenv('YNAB_TIMEOUT')}") from e

        ynab = YnabConfig(
            api_token=os.getenv("YNAB_ACCESS_TOKEN") or None,
            base_url=os.getenv("YNAB_BASE_URL", DEFAULT_YNAB_BASE_URL).rstrip("/"),
            timeout=timeout,
        )

        csv_import = ImportConfig(csv_path=Path(os.getenv("CSVSPLIT_CSV_PATH", DEFAULT_CSV_PATH)))

        return cls(
            environment=env,
            ynab=ynab,
            csv_import=csv_import,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.ynab.timeout <= 0:
            errors.append("YNAB timeout must be positive")

        if not self.ynab.base_url.startswith(("http://", "https://")):
            errors.append(f"YNAB base URL must be http(s): {self.ynab.base_url}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def require_api_token(self) -> str:
        """
        Return the YNAB access token.

        Raises:
            ConfigurationError: If YNAB_ACCESS_TOKEN is not set
        """
        if not self.ynab.api_token:
            raise ConfigurationError("Undefined YNAB_ACCESS_TOKEN")
        return self.ynab.api_token

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Reduce noise from the HTTP stack outside development
        if self.environment != Environment.DEVELOPMENT:
            logging.getLogger("urllib3").setLevel(logging.WARNING)
            logging.getLogger("requests").setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list[str]:
        """Get list of field names that contain sensitive data."""
        return ["ynab.api_token"]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                # Nested dataclass
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***" if nested_value else None
                    elif isinstance(nested_value, Path):
                        nested_dict[nested_name] = str(nested_value)
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
