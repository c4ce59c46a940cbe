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
Alert state store factory.

Creates and initializes the backend selected by ``QUOTA_WARNING_STORE_BACKEND``.
"""

import logging

from ..config import Settings
from .base import AlertStateStore
from .memory_store import InMemoryAlertStateStore

logger = logging.getLogger(__name__)


async def create_state_store(config: Settings | None = None) -> AlertStateStore:
    """
    Create and initialize the configured alert state store.

    Args:
        config: Settings to use; defaults to the module-level settings

    Returns:
        Initialized AlertStateStore instance
    """
    if config is None:
        from ..config import settings as config

    backend = config.store.backend
    app_id = config.quota.app_id
    logger.info(f"Creating {backend} alert state store...")

    if backend == "sqlite":
        from .sqlite_store import SqliteAlertStateStore

        store: AlertStateStore = SqliteAlertStateStore(db_path=config.store.sqlite_path, app_id=app_id)
    elif backend == "redis":
        from .redis_store import RedisAlertStateStore

        store = RedisAlertStateStore(
            url=config.store.redis_url,
            key_prefix=config.store.redis_key_prefix,
            max_connections=config.store.redis_max_connections,
            app_id=app_id,
        )
    else:
        store = InMemoryAlertStateStore(app_id=app_id)

    await store.initialize()
    return store
