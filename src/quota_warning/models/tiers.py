"""Alert tiers and the per-check data carried between the evaluator and its adapters."""

from dataclasses import dataclass
from enum import IntEnum

# Host convention for "no quota set"
SPACE_UNLIMITED = -3


class AlertTier(IntEnum):
    """Severity tiers, valued by the usage percentage that must be exceeded."""

    INFO = 50
    WARNING = 80
    ALERT = 95

    @property
    def threshold(self) -> int:
        return int(self.value)

    @property
    def config_key(self) -> str:
        """Key under which the tier's last-warning timestamp is persisted."""
        return f"warning-{self.value}"

    @classmethod
    def descending(cls) -> list["AlertTier"]:
        return sorted(cls, reverse=True)

    @classmethod
    def for_usage(cls, usage: float) -> "AlertTier | None":
        """Return the highest tier whose threshold *usage* strictly exceeds."""
        for tier in cls.descending():
            if usage > tier.threshold:
                return tier
        return None

    def at_or_below(self) -> list["AlertTier"]:
        return [tier for tier in AlertTier.descending() if tier <= self]

    def at_or_above(self) -> list["AlertTier"]:
        return [tier for tier in sorted(AlertTier) if tier >= self]

    def next_above(self) -> "AlertTier | None":
        higher = [tier for tier in sorted(AlertTier) if tier > self]
        return higher[0] if higher else None


@dataclass(frozen=True)
class UsageReading:
    """Storage figures for one user, as reported by the host."""

    quota_bytes: int  # SPACE_UNLIMITED when no quota applies
    relative: float  # used / quota, 0.0-1.0

    @property
    def is_unlimited(self) -> bool:
        return self.quota_bytes == SPACE_UNLIMITED


@dataclass
class CheckResult:
    """Outcome of a single quota check."""

    user_id: str
    usage: float  # percentage used for the decision, 0-100
    tier: AlertTier | None
    notified: bool = False
    resolved: bool = False

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "usage": self.usage,
            "tier": self.tier.name if self.tier is not None else None,
            "notified": self.notified,
            "resolved": self.resolved,
        }
