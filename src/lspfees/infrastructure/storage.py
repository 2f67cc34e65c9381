"""Storage abstractions and Redis implementation for repositories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .database import DatabaseClient


class KeyValueStore(ABC):
    """Abstract key-value store with the operations used by repositories."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    async def delete(self, key: str) -> int:
        pass


class RedisKeyValueStore(KeyValueStore):
    """Redis-backed implementation of KeyValueStore."""

    def __init__(self, db_client: DatabaseClient):
        self._db_client = db_client

    async def get(self, key: str) -> Optional[str]:
        async with self._db_client.get_connection() as conn:
            return await conn.get(key)

    async def set(self, key: str, value: str) -> None:
        async with self._db_client.get_connection() as conn:
            await conn.set(key, value)

    async def delete(self, key: str) -> int:
        async with self._db_client.get_connection() as conn:
            return await conn.delete(key)
