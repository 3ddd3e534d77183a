"""App settings service.

The settings record is a singleton. Reading it before it was ever saved
creates it from the configured default currency.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from structlog import get_logger

from mun_admin.application.ports.settings_repository import SettingsRepositoryProtocol
from mun_admin.domain.errors import RecordValidationError
from mun_admin.domain.models import AppSettings, RequiredFieldError

logger = get_logger(__name__)

SETTINGS_KIND = "AppSettings"


class AppSettingsService:
    """Get and update the singleton AppSettings record."""

    def __init__(
        self,
        repository: SettingsRepositoryProtocol,
        default_currency: str = "USD",
        default_currency_symbol: str = "$",
    ) -> None:
        self._repository = repository
        self._default_currency = default_currency
        self._default_currency_symbol = default_currency_symbol

    async def get_settings(self) -> AppSettings:
        """Return the settings, creating the defaults on first access."""
        settings = await self._repository.get()
        if settings is None:
            settings = await self._repository.save(
                AppSettings(
                    id=uuid4(),
                    currency=self._default_currency,
                    currency_symbol=self._default_currency_symbol,
                )
            )
            logger.info("app_settings_created", currency=settings.currency)
        return settings

    async def update_settings(self, changes: Mapping[str, Any]) -> AppSettings:
        """Merge ``changes`` into the settings (created first if absent).

        Raises:
            RecordValidationError: If a setting is sent as None.
        """
        current = await self.get_settings()
        try:
            merged = current.merge(changes)
        except RequiredFieldError as e:
            raise RecordValidationError(
                SETTINGS_KIND, e.field_name, "must not be null"
            ) from e
        updated = await self._repository.save(merged)
        logger.info(
            "app_settings_updated",
            currency=updated.currency,
            currency_symbol=updated.currency_symbol,
        )
        return updated
