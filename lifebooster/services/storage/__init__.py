"""
Storage Services Package

Provides the abstract key-value interface, its implementations, and the
adapter that persists the life document through them.
"""

from lifebooster.services.storage.interface import KeyValueStorage, StorageError
from lifebooster.services.storage.local_file import LocalFileStorage
from lifebooster.services.storage.memory import InMemoryStorage
from lifebooster.services.storage.persistence import DocumentStore
from lifebooster.services.storage.upgrade import (
    UPGRADE_STEPS,
    stored_version,
    upgrade_document,
)

__all__ = [
    # Interface
    "KeyValueStorage",
    "StorageError",
    # Implementations
    "InMemoryStorage",
    "LocalFileStorage",
    # Document adapter
    "DocumentStore",
    "UPGRADE_STEPS",
    "stored_version",
    "upgrade_document",
]
