"""
Storage layer for MCPolice.

Pluggable key/value backends:

- memory (default; tests, development, stdio transport)
- redis (production)

Usage:
    from mcpolice.store import ViolationStore, get_store_backend

    store = ViolationStore(get_store_backend())
"""

from mcpolice.config import Settings, settings as default_settings
from mcpolice.errors import StoreError
from mcpolice.store.base import KeyValueBackend
from mcpolice.store.memory import MemoryBackend
from mcpolice.store.violation_store import ViolationStore

__all__ = [
    "KeyValueBackend",
    "MemoryBackend",
    "ViolationStore",
    "get_store_backend",
]


def get_store_backend(settings: Settings | None = None) -> KeyValueBackend:
    """
    Build the backend selected by STORE_BACKEND ("memory" or "redis").

    Raises:
        StoreError: Unknown backend type.
        redis.ConnectionError: Redis selected but unreachable.
    """
    settings = settings or default_settings
    backend_type = settings.STORE_BACKEND.lower()

    if backend_type == "memory":
        return MemoryBackend()

    elif backend_type == "redis":
        # Lazy import so the memory backend works without a Redis server
        from mcpolice.core.redis import get_redis_client
        from mcpolice.store.redis import RedisBackend

        return RedisBackend(get_redis_client(settings.REDIS_URL))

    else:
        raise StoreError(f"Unknown storage backend: {backend_type}")
