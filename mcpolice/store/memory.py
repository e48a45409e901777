"""
In-memory key/value backend.

Used for tests, development and the stdio transport. All data is lost
when the process exits.
"""

import threading
from typing import Any

from mcpolice.store.base import KeyValueBackend, UpdateFn


class MemoryBackend(KeyValueBackend):
    """Dict-backed store. Thread-safe; update() runs under the lock."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def update(self, key: str, fn: UpdateFn) -> str:
        with self._lock:
            value = fn(self._data.get(key))
            self._data[key] = value
            return value

    def is_available(self) -> bool:
        return True

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)

    def get_info(self) -> dict[str, Any]:
        info = super().get_info()
        with self._lock:
            info["key_count"] = len(self._data)
        return info
