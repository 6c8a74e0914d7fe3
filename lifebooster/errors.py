"""
Exception hierarchy for LifeBooster.

Reducers raise ReducerError subclasses; the store turns them into no-ops.
Storage backends raise StorageError; the persistence adapter logs and
swallows them so the caller always gets a usable answer.
"""

from typing import Optional


class LifeBoosterError(Exception):
    """Base exception for everything raised by this package."""
    pass


class ReducerError(LifeBoosterError):
    """A reducer refused to produce a new document."""
    pass


class InvalidInputError(ReducerError):
    """User input was rejected before any entity was built."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class EntityNotFoundError(ReducerError):
    """No entity with the given id exists where the reducer looked."""

    def __init__(self, collection: str, entity_id: str):
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"No entry with id {entity_id!r} in {collection}")


class StorageError(LifeBoosterError):
    """Base exception for storage backend operations."""

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message)
