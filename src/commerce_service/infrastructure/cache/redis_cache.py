from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

import redis.asyncio as aioredis

from commerce_service.infrastructure.cache import serializer

logger = logging.getLogger(__name__)


class RedisCache:
    """JSON value cache over a ``redis.asyncio`` client.

    Values are stored as JSON; datetimes and UUIDs are written as strings
    and ISO timestamps come back as ``datetime``. A stored ``null`` counts
    as a miss.
    """

    def __init__(self, redis: aioredis.Redis) -> None:
        self._redis = redis

    async def get(self, key: str) -> Any | None:
        raw = await self._redis.get(key)
        return serializer.loads(raw) if raw is not None else None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        await self._redis.set(key, serializer.dumps(value), ex=ttl)

    async def delete(self, key: str) -> None:
        await self._redis.delete(key)

    async def clear_all(self) -> None:
        await self._redis.flushdb()

    async def get_or_set(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
        ttl: int | None = None,
    ) -> Any:
        cached = await self.get(key)
        if cached is not None:
            return cached

        # TODO: lock per key so concurrent misses do not all hit the loader.
        value = await loader()
        await self.set(key, value, ttl)
        return value

    async def mget_or_mset(
        self,
        keys: Sequence[str],
        loader: Callable[[list[str]], Awaitable[Mapping[str, Any]]],
        ttl: int | None = None,
    ) -> list[Any]:
        """Return values for ``keys`` in order, loading and caching the misses.

        Keys the loader has no value for are left out of the result.
        """
        if not keys:
            return []

        results: dict[str, Any] = {}
        missing: list[str] = []
        for key, raw in zip(keys, await self._redis.mget(keys)):
            if raw is None:
                missing.append(key)
            else:
                results[key] = serializer.loads(raw)

        if missing:
            fetched = await loader(missing)
            logger.debug("Cache miss for %d of %d keys", len(missing), len(keys))
            if fetched:
                async with self._redis.pipeline(transaction=False) as pipe:
                    for key, value in fetched.items():
                        pipe.set(key, serializer.dumps(value), ex=ttl)
                    await pipe.execute()
                results.update(fetched)

        return [results[key] for key in keys if results.get(key) is not None]
