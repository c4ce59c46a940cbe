"""Dict-backed alert state store for single-process hosts and tests."""

from .base import AlertStateStore


class InMemoryAlertStateStore(AlertStateStore):
    def __init__(self, app_id: str = "quota_warning"):
        super().__init__(app_id)
        self._values: dict[tuple[str, str, str], str] = {}

    async def get_value(self, user_id: str, key: str) -> str | None:
        return self._values.get((user_id, self.app_id, key))

    async def set_value(self, user_id: str, key: str, value: str) -> None:
        self._values[(user_id, self.app_id, key)] = value

    async def delete_value(self, user_id: str, key: str) -> None:
        self._values.pop((user_id, self.app_id, key), None)

    def snapshot(self, user_id: str) -> dict[str, str]:
        """Return all values stored for *user_id*, keyed by config key."""
        return {key: value for (uid, app, key), value in self._values.items() if uid == user_id and app == self.app_id}
