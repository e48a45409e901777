"""
Abstract base class for key/value backends.

The violation store only needs single-key get/put/delete plus one atomic
read-modify-write on a single key. Backends offer no multi-key
transactions.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

UpdateFn = Callable[[str | None], str]


class KeyValueBackend(ABC):
    """
    Interface implemented by every key/value collaborator.

    All methods raise StoreError when the underlying backend fails.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Read the value stored under a key.

        Returns:
            The stored string, or None if the key does not exist.
        """

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Write a value, replacing any existing one."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Deleting a missing key is not an error."""

    @abstractmethod
    def update(self, key: str, fn: UpdateFn) -> str:
        """
        Atomically replace the value under a key with fn(current).

        Args:
            key: Key to update
            fn: Receives the current value (None if missing), returns the new one

        Returns:
            The value written.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the backend is reachable."""

    def get_info(self) -> dict[str, Any]:
        return {
            "backend_type": self.__class__.__name__,
            "available": self.is_available(),
        }
