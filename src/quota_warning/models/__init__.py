from .notification import QUOTA_OBJECT_TYPE, QuotaNotification
from .tiers import SPACE_UNLIMITED, AlertTier, CheckResult, UsageReading

__all__ = [
    "AlertTier",
    "CheckResult",
    "QUOTA_OBJECT_TYPE",
    "QuotaNotification",
    "SPACE_UNLIMITED",
    "UsageReading",
]
