"""
In-Memory Storage

Keeps values in a dict for the life of the object. Used by tests and by
callers that want a throwaway document.
"""

from typing import Optional

from lifebooster.services.storage.interface import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Dict-backed key-value storage."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._items
