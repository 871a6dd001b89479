"""Firm settings: a single row, created with defaults on first read."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.sql import func

from firmdesk.domain.exceptions import ValidationException
from firmdesk.infrastructure.persistence.models import FirmSettings
from firmdesk.infrastructure.persistence.repositories import SettingsRepository

logger = logging.getLogger(__name__)

_FIELDS = ("firm_name", "location", "address", "phone", "email")
_REQUIRED_ON_CREATE = {"firm_name": "firmName", "location": "location"}


class SettingsService:
    def __init__(
        self,
        settings_repo: SettingsRepository,
        *,
        default_firm_name: str,
        default_location: str,
    ) -> None:
        self._repo = settings_repo
        self._default_firm_name = default_firm_name
        self._default_location = default_location

    async def get_settings(self) -> FirmSettings:
        """Return the settings row, creating it from the defaults if absent."""
        current = await self._repo.get_current()
        if current is not None:
            return current
        current, created = await self._repo.get_or_create(
            firm_name=self._default_firm_name,
            location=self._default_location,
        )
        if created:
            logger.info("No firm settings found; created defaults")
        return current

    async def update_settings(self, changes: dict[str, Any]) -> FirmSettings:
        """Partial update of the row.

        With no row yet, changes must form a complete create payload
        (firm name and location); otherwise ValidationException. If another
        request creates the row first, changes are applied to that row.
        """
        current = await self._repo.get_current()
        if current is None:
            for key, field in _REQUIRED_ON_CREATE.items():
                if not changes.get(key):
                    raise ValidationException(f"{field} is required", field=field)
            current, created = await self._repo.get_or_create(
                **{k: changes.get(k) for k in _FIELDS}
            )
            if created:
                return current
        for key in _FIELDS:
            if key not in changes:
                continue
            if key in _REQUIRED_ON_CREATE and not changes[key]:
                raise ValidationException(
                    f"{_REQUIRED_ON_CREATE[key]} cannot be empty",
                    field=_REQUIRED_ON_CREATE[key],
                )
            setattr(current, key, changes[key])
        current.updated_at = func.now()
        return await self._repo.update(current)
