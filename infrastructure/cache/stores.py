from typing import Protocol

from redis import asyncio as redis


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    def __init__(self):
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value


class RedisKeyValueStore:
    """Plain GET/SET on a single key; freshness is checked by the reader, not by Redis expiry."""

    def __init__(self, redis_client: redis.Redis):
        self.redis = redis_client

    @classmethod
    def from_url(cls, url: str) -> "RedisKeyValueStore":
        # Raw bytes from Redis; undecodable data must reach the reader as corrupt JSON
        return cls(redis.Redis.from_url(url, decode_responses=False))

    async def get(self, key: str) -> str | None:
        data = await self.redis.get(key)
        if data is None:
            return None
        if isinstance(data, bytes):
            return data.decode("utf-8", errors="replace")
        return data

    async def set(self, key: str, value: str) -> None:
        await self.redis.set(key, value)

    async def close(self) -> None:
        await self.redis.aclose()
