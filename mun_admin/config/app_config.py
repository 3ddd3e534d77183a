"""Application configuration for the MUN Admin API.

This module defines the runtime configuration with environment variable
overrides, following the same frozen-dataclass pattern used for every
other tunable in the service.

Environment Variables:
- MUN_ENVIRONMENT: 'development' (console logs) or 'production' (JSON logs)
- LOG_LEVEL: Log level name (default: INFO)
- MUN_SERVICE_NAME: Service label for metrics (default: mun-admin-api)
- MUN_SEED_DEFAULTS: Seed default portfolios, criteria and award types (default: true)
- MUN_DEFAULT_CURRENCY: Currency code for fresh app settings (default: USD)
- MUN_DEFAULT_CURRENCY_SYMBOL: Currency symbol for fresh app settings (default: $)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

VALID_ENVIRONMENTS = frozenset({"development", "production", "test"})
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        Stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognised.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class AppConfig:
    """Runtime configuration for the API process.

    Attributes:
        environment: Deployment environment. Selects the log renderer.
        log_level: Minimum log level name.
        service_name: Label attached to every Prometheus metric.
        seed_defaults: Whether startup seeds the store with default records.
        default_currency: Currency code used when app settings are first created.
        default_currency_symbol: Symbol paired with default_currency.
    """

    environment: str = "development"
    log_level: str = "INFO"
    service_name: str = "mun-admin-api"
    seed_defaults: bool = True
    default_currency: str = "USD"
    default_currency_symbol: str = "$"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )
        if not self.service_name:
            raise ValueError("service_name must not be empty")
        if not self.default_currency:
            raise ValueError("default_currency must not be empty")

    @property
    def is_production(self) -> bool:
        """Whether logs should be rendered as JSON."""
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> "AppConfig":
        """Create config from environment variables with defaults.

        Returns:
            AppConfig with values from environment or defaults.
        """
        return cls(
            environment=_get_str_env("MUN_ENVIRONMENT", "development").lower(),
            log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
            service_name=_get_str_env("MUN_SERVICE_NAME", "mun-admin-api"),
            seed_defaults=_get_bool_env("MUN_SEED_DEFAULTS", True),
            default_currency=_get_str_env("MUN_DEFAULT_CURRENCY", "USD"),
            default_currency_symbol=_get_str_env("MUN_DEFAULT_CURRENCY_SYMBOL", "$"),
        )


# Default config (no environment overrides applied)
DEFAULT_APP_CONFIG = AppConfig()

# Testing config: empty store, quiet logs
TEST_APP_CONFIG = AppConfig(
    environment="test",
    log_level="WARNING",
    seed_defaults=False,
)
