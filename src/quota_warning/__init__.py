"""Storage quota warnings with tiered thresholds and a per-tier cooldown."""

from .models import AlertTier, CheckResult, QuotaNotification, UsageReading
from .services import QuotaAlertEvaluator

__version__ = "0.1.0"

__all__ = [
    "AlertTier",
    "CheckResult",
    "QuotaAlertEvaluator",
    "QuotaNotification",
    "UsageReading",
]
