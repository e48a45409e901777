"""
Redis key/value backend.

update() is an optimistic compare-and-swap: the key is WATCHed, the new
value computed, and the write committed with MULTI/EXEC. redis-py retries
the whole callable when another client modifies the key in between.
"""

import logging
from typing import Any

import redis

from mcpolice.errors import StoreError
from mcpolice.store.base import KeyValueBackend, UpdateFn

logger = logging.getLogger(__name__)


class RedisBackend(KeyValueBackend):
    def __init__(self, client: redis.Redis) -> None:
        self.client = client

    def get(self, key: str) -> str | None:
        try:
            return self.client.get(key)
        except redis.RedisError as e:
            logger.exception("Redis GET failed for key %s", key)
            raise StoreError("Storage backend unavailable") from e

    def put(self, key: str, value: str) -> None:
        try:
            self.client.set(key, value)
        except redis.RedisError as e:
            logger.exception("Redis SET failed for key %s", key)
            raise StoreError("Storage backend unavailable") from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(key)
        except redis.RedisError as e:
            logger.exception("Redis DEL failed for key %s", key)
            raise StoreError("Storage backend unavailable") from e

    def update(self, key: str, fn: UpdateFn) -> str:
        def _swap(pipe: redis.client.Pipeline) -> str:
            value = fn(pipe.get(key))
            pipe.multi()
            pipe.set(key, value)
            return value

        try:
            return self.client.transaction(_swap, key, value_from_callable=True)
        except redis.RedisError as e:
            logger.exception("Redis transaction failed for key %s", key)
            raise StoreError("Storage backend unavailable") from e

    def is_available(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError:
            return False

    def get_info(self) -> dict[str, Any]:
        info = super().get_info()
        info["connection"] = repr(self.client.connection_pool)
        return info
