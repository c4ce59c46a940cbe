"""Quota alert evaluation: tier thresholds with a per-tier notification cooldown."""

import logging
from collections.abc import Callable
from datetime import datetime

from .. import config
from ..config import QuotaWarningSettings
from ..models.notification import QuotaNotification
from ..models.tiers import AlertTier, CheckResult
from ..notifications import NotificationSink
from ..sources import UsageSource
from ..storage.base import AlertStateStore
from ..utils.errors import InvalidNotificationError, StorageNotFoundError
from ..utils.timestamps import add_days, utcnow

logger = logging.getLogger(__name__)


class QuotaAlertEvaluator:
    """Decides whether a user's quota usage warrants a notification.

    State lives entirely in the injected store and sink; the evaluator keeps
    nothing between calls. Run :meth:`check` once per user per schedule tick.
    """

    def __init__(
        self,
        usage_source: UsageSource,
        state_store: AlertStateStore,
        notification_sink: NotificationSink,
        settings: QuotaWarningSettings | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.usage_source = usage_source
        self.state_store = state_store
        self.notification_sink = notification_sink
        self.settings = settings or config.settings.quota
        self.clock = clock

    async def check(self, user_id: str) -> CheckResult:
        """
        Check the quota of a user and issue, escalate or clear the warning.

        Never raises for missing storage or rejected notifications.
        """
        if not user_id:
            raise ValueError("user_id must not be empty")

        usage = await self.get_relative_quota_usage(user_id)
        tier = AlertTier.for_usage(usage)
        result = CheckResult(user_id=user_id, usage=usage, tier=tier)

        if tier is None:
            result.resolved = await self.remove_warning(user_id)
            await self.remove_last_warning(user_id, AlertTier.INFO)
            return result

        if await self.should_issue_warning(user_id, tier):
            result.notified = await self.issue_warning(user_id, usage)
        else:
            logger.debug(f"Quota warning for {user_id} at {tier.name} suppressed by cooldown")

        await self.update_last_warning(user_id, tier)

        higher = tier.next_above()
        if higher is not None:
            await self.remove_last_warning(user_id, higher)

        return result

    async def get_relative_quota_usage(self, user_id: str) -> float:
        """Return usage as a percentage (0-100); exempt or unknown storage counts as 0."""
        try:
            reading = await self.usage_source.get_usage(user_id)
        except StorageNotFoundError:
            logger.debug(f"No storage found for {user_id}, treating usage as 0")
            return 0.0

        # No warnings for unlimited storage or tiny quotas
        if reading.is_unlimited or reading.quota_bytes < self.settings.min_quota_bytes:
            return 0.0

        return reading.relative * 100

    async def should_issue_warning(self, user_id: str, tier: AlertTier) -> bool:
        """True unless the user was warned at *tier* within the cooldown window."""
        last_warning = await self.state_store.get_last_alert(user_id, tier)
        if last_warning is None:
            return True

        return add_days(last_warning, self.settings.cooldown_days) < self.clock()

    async def issue_warning(self, user_id: str, usage: float) -> bool:
        """Replace any open warning for the user with a fresh one. Returns True if created."""
        await self.remove_warning(user_id)

        notification = QuotaNotification.for_usage(
            app_id=self.settings.app_id,
            user_id=user_id,
            usage=usage,
            created_at=self.clock(),
        )
        try:
            await self.notification_sink.notify(notification)
        except InvalidNotificationError as e:
            logger.warning(f"[{self.settings.app_id}] Quota notification rejected for {user_id}: {e}", exc_info=True)
            return False

        logger.info(f"Issued quota warning for {user_id} at {usage:.1f}%")
        return True

    async def remove_warning(self, user_id: str) -> bool:
        """Resolve any open quota warning of the user. Returns False if the sink rejected the call."""
        try:
            await self.notification_sink.resolve_all(self.settings.app_id, user_id)
        except InvalidNotificationError as e:
            logger.warning(f"[{self.settings.app_id}] Quota notification resolve rejected for {user_id}: {e}", exc_info=True)
            return False
        return True

    async def update_last_warning(self, user_id: str, tier: AlertTier) -> None:
        """Stamp *tier* and every tier below it with the current time."""
        now = self.clock()
        for level in tier.at_or_below():
            await self.state_store.set_last_alert(user_id, level, now)

    async def remove_last_warning(self, user_id: str, tier: AlertTier) -> None:
        """Forget the last warning for *tier* and every tier above it."""
        for level in tier.at_or_above():
            await self.state_store.clear_last_alert(user_id, level)
