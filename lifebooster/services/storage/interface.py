"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for the storage slot.
This allows us to:
1. Keep the document on local disk today
2. Use in-memory storage for testing
3. Swap in another key-value backend later without touching reducers

The interface is intentionally tiny - a key-value slot holding a string.
The document is always read and written whole; there are no partial updates.
"""

from abc import ABC, abstractmethod
from typing import Optional

from lifebooster.errors import StorageError


class KeyValueStorage(ABC):
    """
    Abstract interface for a string key-value store.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under `key`.

        Returns:
            The stored string, or None if nothing is stored

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Overwrite the value stored under `key`.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """
        Remove `key`. Removing a missing key is not an error.

        Raises:
            StorageError: If the backend cannot be written
        """
        pass


__all__ = ["KeyValueStorage", "StorageError"]
