"""Notification payload handed to the notification sink."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

QUOTA_OBJECT_TYPE = "quota"


class QuotaNotification(BaseModel):
    """A quota warning for one user.

    Identified by ``(app_id, object_type, object_id)``; the evaluator keeps at
    most one of these open per user by resolving before creating.
    """

    app_id: str
    user_id: str
    object_type: str = QUOTA_OBJECT_TYPE
    object_id: str
    subject_params: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def for_usage(cls, app_id: str, user_id: str, usage: float, created_at: datetime) -> "QuotaNotification":
        return cls(
            app_id=app_id,
            user_id=user_id,
            object_id=user_id,
            subject_params={"usage": usage},
            created_at=created_at,
        )

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.app_id, self.object_type, self.object_id)
