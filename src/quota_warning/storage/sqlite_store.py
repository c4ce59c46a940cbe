# Copyright 2024 Heinrich Krupp
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
SQLite alert state store.

Persists last-warning timestamps in a ``preferences`` table shaped like a
host's per-user app config: ``(user_id, app_id, config_key) -> config_value``.
Async operations using aiosqlite.
"""

import logging
import os

import aiosqlite

from .base import AlertStateStore

logger = logging.getLogger(__name__)


class SqliteAlertStateStore(AlertStateStore):
    """Async SQLite-backed alert state store."""

    def __init__(self, db_path: str, app_id: str = "quota_warning"):
        """
        Initialize the store.

        Args:
            db_path: Path to SQLite database file
            app_id: Namespace for the stored keys
        """
        super().__init__(app_id)
        self.db_path = db_path
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize database schema if not exists."""
        if self._initialized:
            return

        directory = os.path.dirname(self.db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                CREATE TABLE IF NOT EXISTS preferences (
                    user_id TEXT NOT NULL,
                    app_id TEXT NOT NULL,
                    config_key TEXT NOT NULL,
                    config_value TEXT,
                    PRIMARY KEY (user_id, app_id, config_key)
                )
            """
            )
            await db.commit()

        self._initialized = True
        logger.info(f"Alert state database initialized at {self.db_path}")

    async def get_value(self, user_id: str, key: str) -> str | None:
        await self.initialize()

        async with aiosqlite.connect(self.db_path) as db:
            async with db.execute(
                "SELECT config_value FROM preferences WHERE user_id = ? AND app_id = ? AND config_key = ?",
                (user_id, self.app_id, key),
            ) as cursor:
                row = await cursor.fetchone()

        return row[0] if row else None

    async def set_value(self, user_id: str, key: str, value: str) -> None:
        await self.initialize()

        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO preferences (user_id, app_id, config_key, config_value)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(user_id, app_id, config_key) DO UPDATE SET config_value = excluded.config_value
            """,
                (user_id, self.app_id, key, value),
            )
            await db.commit()

    async def delete_value(self, user_id: str, key: str) -> None:
        await self.initialize()

        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "DELETE FROM preferences WHERE user_id = ? AND app_id = ? AND config_key = ?",
                (user_id, self.app_id, key),
            )
            await db.commit()
