"""Services package."""

from lifebooster.services.locale import detect_default_currency
from lifebooster.services.storage import (
    DocumentStore,
    InMemoryStorage,
    KeyValueStorage,
    LocalFileStorage,
    StorageError,
)

__all__ = [
    # Locale
    "detect_default_currency",
    # Storage
    "DocumentStore",
    "InMemoryStorage",
    "KeyValueStorage",
    "LocalFileStorage",
    "StorageError",
]
