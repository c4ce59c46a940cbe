"""Errors raised by the usage source and notification sink adapters."""


class StorageNotFoundError(Exception):
    """Raised when the storage location of a user cannot be resolved."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Storage not found for user '{user_id}'")


class InvalidNotificationError(ValueError):
    """Raised by a notification sink that rejects a malformed notification."""
