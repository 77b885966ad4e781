"""Redis-backed cache for search responses.

CacheService implements ICacheService and is created by the lifespan and
attached to app.state.cache; nothing here is module-level state. Every
operation degrades to a miss (or no-op) when Redis is unreachable, so the
search endpoint keeps answering from the database.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import redis.asyncio as redis

from portfolio.core.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNLINK_CHUNK_SIZE = 500


class CacheService:
    """Async Redis cache with JSON values and TTLs.

    Call connect() at startup and disconnect() at shutdown. A dropped
    connection is re-established once per failing call.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize cache service.

        Args:
            redis_client: Ready client (tests, DI). When given, the service
                counts as connected and connect() is a no-op.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None

    def _new_client(self) -> redis.Redis:
        password = self.settings.redis_password
        return redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=password.get_secret_value() if password else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )

    async def connect(self) -> None:
        """Open and ping the Redis connection; on failure the cache stays disabled."""
        if self.redis is not None:
            return
        client = self._new_client()
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Search cache disabled.", e)
            await client.aclose()
            return
        self.redis = client
        self._connected = True
        logger.info(
            "Redis cache connected: %s:%s", self.settings.redis_host, self.settings.redis_port
        )

    async def disconnect(self) -> None:
        """Close the Redis connection."""
        if self.redis is None:
            return
        await self.redis.aclose()
        self.redis = None
        self._connected = False
        logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Replace a dropped connection. Returns True if Redis answers again."""
        stale, self.redis, self._connected = self.redis, None, False
        if stale is not None:
            try:
                await stale.aclose()
            except redis.RedisError:
                logger.debug("Ignoring error while closing stale Redis connection")
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def _run(
        self,
        operation: str,
        target: str,
        call: Callable[[redis.Redis], Awaitable[T]],
        fallback: T,
    ) -> T:
        """Run call against Redis, retrying once after a reconnect; fallback on failure."""
        if not self.is_available() or self.redis is None:
            return fallback
        try:
            return await call(self.redis)
        except (redis.ConnectionError, redis.TimeoutError):
            if not await self._reconnect() or self.redis is None:
                logger.warning("Cache %s unavailable for %s (Redis disconnected)", operation, target)
                return fallback
            try:
                return await call(self.redis)
            except redis.RedisError:
                logger.exception("Cache %s error for %s after reconnect", operation, target)
                return fallback
        except redis.RedisError:
            logger.exception("Cache %s error for %s", operation, target)
            return fallback

    async def get(self, key: str) -> Any | None:
        """Return the cached JSON value for key, or None on miss or failure."""
        raw = await self._run("get", key, lambda client: client.get(key), None)
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value (JSON-serializable) under key for ttl seconds. True if stored."""
        serialized = json.dumps(value)

        async def _setex(client: redis.Redis) -> bool:
            await client.setex(key, ttl, serialized)
            return True

        stored = await self._run("set", key, _setex, False)
        if stored:
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return stored

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching a SCAN pattern with batched UNLINK. Returns the count."""

        async def _scan_and_unlink(client: redis.Redis) -> int:
            deleted = 0
            chunk: list[str] = []
            async for key in client.scan_iter(match=pattern):
                chunk.append(key)
                if len(chunk) >= UNLINK_CHUNK_SIZE:
                    deleted += int(await client.unlink(*chunk) or 0)
                    chunk = []
            if chunk:
                deleted += int(await client.unlink(*chunk) or 0)
            return deleted

        deleted = await self._run("delete_pattern", pattern, _scan_and_unlink, 0)
        if deleted:
            logger.info("Cache INVALIDATE: %s (%s keys)", pattern, deleted)
        return deleted
