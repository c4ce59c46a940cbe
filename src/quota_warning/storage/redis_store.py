"""
Redis alert state store.

One hash per user at ``<key_prefix><app_id>:<user_id>``; hash fields are the
tier config keys (``warning-50`` ...) and values are ATOM timestamps.
"""

import logging

from redis.asyncio import ConnectionPool, Redis

from .base import AlertStateStore

logger = logging.getLogger(__name__)


class RedisAlertStateStore(AlertStateStore):
    """Redis-backed alert state store."""

    def __init__(
        self,
        url: str = "redis://localhost:6379",
        key_prefix: str = "quota:warning:",
        max_connections: int = 10,
        app_id: str = "quota_warning",
    ):
        super().__init__(app_id)
        self.url = url
        self.key_prefix = key_prefix
        self.max_connections = max_connections

        self._pool: ConnectionPool | None = None
        self._redis: Redis | None = None
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize Redis connection pool."""
        if self._initialized:
            return

        self._pool = ConnectionPool.from_url(
            self.url,
            max_connections=self.max_connections,
            decode_responses=True,
        )
        self._redis = Redis(connection_pool=self._pool)

        try:
            await self._redis.ping()
            self._initialized = True
            logger.info(f"RedisAlertStateStore initialized: {self.url}")
        except Exception as e:
            logger.error(f"RedisAlertStateStore initialization failed: {e}")
            await self.close()
            raise

    async def close(self) -> None:
        """Close Redis connection pool."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None

        if self._pool:
            await self._pool.aclose()
            self._pool = None

        self._initialized = False

    def _make_key(self, user_id: str) -> str:
        return f"{self.key_prefix}{self.app_id}:{user_id}"

    def _client(self) -> Redis:
        if not self._initialized or self._redis is None:
            raise RuntimeError("RedisAlertStateStore used before initialize()")
        return self._redis

    async def get_value(self, user_id: str, key: str) -> str | None:
        return await self._client().hget(self._make_key(user_id), key)

    async def set_value(self, user_id: str, key: str, value: str) -> None:
        await self._client().hset(self._make_key(user_id), key, value)

    async def delete_value(self, user_id: str, key: str) -> None:
        await self._client().hdel(self._make_key(user_id), key)
