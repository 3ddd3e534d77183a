"""App settings repository port (singleton record)."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from mun_admin.domain.models.settings import AppSettings


class SettingsRepositoryProtocol(Protocol):
    """Holds at most one AppSettings record."""

    @abstractmethod
    async def get(self) -> AppSettings | None:
        """Return the settings, or None if never saved."""
        ...

    @abstractmethod
    async def save(self, settings: AppSettings) -> AppSettings:
        """Replace the stored settings."""
        ...
