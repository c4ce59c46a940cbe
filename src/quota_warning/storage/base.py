"""
Alert state persistence interface.

Backends implement a per-user key/value store; this base class maps tiers to
keys and timestamps to their ATOM string form on top of it.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime

from ..models.tiers import AlertTier
from ..utils.timestamps import format_atom, parse_atom

logger = logging.getLogger(__name__)


class AlertStateStore(ABC):
    """Per-user, per-tier last-warning timestamps."""

    def __init__(self, app_id: str = "quota_warning"):
        self.app_id = app_id

    async def initialize(self) -> None:
        """Open connections / create schema. No-op by default."""

    async def close(self) -> None:
        """Release resources. No-op by default."""

    @abstractmethod
    async def get_value(self, user_id: str, key: str) -> str | None:
        """Return the stored string for *key*, or None when unset."""

    @abstractmethod
    async def set_value(self, user_id: str, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    async def delete_value(self, user_id: str, key: str) -> None:
        """Remove *key*. Deleting a missing key is not an error."""

    async def get_last_alert(self, user_id: str, tier: AlertTier) -> datetime | None:
        raw = await self.get_value(user_id, tier.config_key)
        if not raw:
            return None
        try:
            return parse_atom(raw)
        except ValueError:
            logger.warning(f"Ignoring unparsable {tier.config_key} value for user {user_id}: {raw!r}")
            return None

    async def set_last_alert(self, user_id: str, tier: AlertTier, when: datetime) -> None:
        await self.set_value(user_id, tier.config_key, format_atom(when))

    async def clear_last_alert(self, user_id: str, tier: AlertTier) -> None:
        await self.delete_value(user_id, tier.config_key)
