"""Alert state persistence backends."""

from .base import AlertStateStore
from .factory import create_state_store
from .memory_store import InMemoryAlertStateStore

__all__ = ["AlertStateStore", "InMemoryAlertStateStore", "create_state_store"]
