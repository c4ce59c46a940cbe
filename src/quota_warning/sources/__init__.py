"""
Usage sources report how much of their quota a user has consumed.

Computing usage is the host's job; adapters here only relay its figures.
"""

from abc import ABC, abstractmethod

from ..models.tiers import UsageReading
from ..utils.errors import StorageNotFoundError


class UsageSource(ABC):
    """Abstract provider of per-user storage usage."""

    @abstractmethod
    async def get_usage(self, user_id: str) -> UsageReading:
        """
        Return the current quota and relative usage for a user.

        Raises:
            StorageNotFoundError: If the user's storage cannot be resolved
        """


class StaticUsageSource(UsageSource):
    """In-memory usage source fed by the host via :meth:`set_usage`."""

    def __init__(self, readings: dict[str, UsageReading] | None = None):
        self._readings: dict[str, UsageReading] = dict(readings or {})

    def set_usage(self, user_id: str, quota_bytes: int, relative: float) -> UsageReading:
        if not 0.0 <= relative <= 1.0:
            raise ValueError(f"relative usage must be within [0, 1], got {relative}")
        reading = UsageReading(quota_bytes=quota_bytes, relative=relative)
        self._readings[user_id] = reading
        return reading

    def remove(self, user_id: str) -> None:
        self._readings.pop(user_id, None)

    async def get_usage(self, user_id: str) -> UsageReading:
        try:
            return self._readings[user_id]
        except KeyError:
            raise StorageNotFoundError(user_id) from None


__all__ = ["StaticUsageSource", "UsageSource"]
