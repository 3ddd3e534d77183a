"""Configuration module for MUN Admin.

Available Configurations:
- AppConfig: Environment, logging, metrics labels and seed behaviour
"""

from mun_admin.config.app_config import (
    DEFAULT_APP_CONFIG,
    TEST_APP_CONFIG,
    AppConfig,
)

__all__ = [
    "AppConfig",
    "DEFAULT_APP_CONFIG",
    "TEST_APP_CONFIG",
]
