"""Current user preferences."""

import logging

from ..db.repositories import SettingsRepository
from ..errors import PersistenceError
from ..models.settings import AppSettings

logger = logging.getLogger(__name__)


class SettingsProvider:
    """Holds the active AppSettings and persists changes to them."""

    def __init__(
        self,
        repository: SettingsRepository | None = None,
        settings: AppSettings | None = None,
    ):
        self.repository = repository
        self._settings = settings or AppSettings()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def notifications_enabled(self) -> bool:
        return self._settings.notifications_enabled

    @property
    def reminder_lead_minutes(self) -> int:
        return self._settings.reminder_lead_minutes

    @property
    def week_start_day(self) -> int:
        return self._settings.week_start_day

    async def load(self) -> AppSettings:
        """Load stored settings, falling back to defaults on any failure."""
        if self.repository is None:
            return self._settings
        try:
            stored = await self.repository.get()
        except PersistenceError:
            logger.exception("Failed to load settings, using defaults")
            stored = None
        self._settings = stored or AppSettings()
        return self._settings

    async def update(self, **changes) -> AppSettings:
        """Apply and persist setting changes.

        Raises:
            ValueError: If a change is unknown or out of range
        """
        self._settings = self._settings.merged(**changes)
        if self.repository is not None:
            try:
                await self.repository.save(self._settings)
            except PersistenceError:
                logger.exception("Failed to save settings")
        return self._settings
