"""
State Container for LifeBooster

This module owns the one live LifeDocument and is the only thing that
replaces it. Callers hold a LifeStore handle and dispatch reducers to it:

    store = create_store()
    store.dispatch(add_task, "Call the bank", priority="high")
    store.dispatch(move_to_trash, task, TrashKind.TASK)

DESIGN DECISION: The store enforces the boundaries:
- The document is only ever replaced, with a reducer's result
- Every accepted change is written back to storage immediately
- Refused input leaves the document exactly as it was
- Every action is logged

Single-threaded by contract: one store, one writer, no locking.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, Union

from lifebooster.audit import ActivityLogger
from lifebooster.config import get_settings
from lifebooster.errors import ReducerError
from lifebooster.models.document import LifeDocument, initial_document
from lifebooster.reducers.profile import touch_last_active
from lifebooster.services.locale import detect_default_currency
from lifebooster.services.storage import (
    DocumentStore,
    KeyValueStorage,
    LocalFileStorage,
)


Reducer = Callable[..., LifeDocument]


class LifeStore:
    """
    Owner of the current document.

    Flow for every change:
    1. Run the reducer against the current document
    2. Refused? Log it and keep the current document (no-op)
    3. Accepted? Swap in the new document
    4. Save it (a failed save is logged, not raised)
    """

    def __init__(
        self,
        persistence: DocumentStore,
        document: LifeDocument,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        self._persistence = persistence
        self._document = document
        self._activity_logger = activity_logger or ActivityLogger()

    @classmethod
    def open(
        cls,
        persistence: DocumentStore,
        activity_logger: Optional[ActivityLogger] = None,
        now: Optional[datetime] = None,
    ) -> "LifeStore":
        """
        Load the stored document, or start a fresh one if none is usable.

        A corrupt or missing document is never an error here - the user
        simply gets a new default document. An unusable stored blob is
        copied aside first, never overwritten in place.
        """
        activity_logger = activity_logger or ActivityLogger()
        document = persistence.load()

        if document is None:
            persistence.back_up(now)
            document = _fresh_document(now)
            persistence.save(document)
            activity_logger.log_document_created(document.user_id, document.currency)
            return cls(persistence, document, activity_logger)

        activity_logger.log_document_loaded(document.user_id, document.schema_version)
        store = cls(persistence, document, activity_logger)
        store.dispatch(touch_last_active, now=now)
        return store

    @property
    def document(self) -> LifeDocument:
        """The current document. Immutable - use dispatch() to change it."""
        return self._document

    def dispatch(self, reducer: Reducer, *args: Any, **kwargs: Any) -> bool:
        """
        Apply a reducer to the current document and persist the result.

        Args:
            reducer: Any function (document, *args, **kwargs) -> document
            *args, **kwargs: Passed to the reducer after the document

        Returns:
            True if the document changed, False if the reducer refused
        """
        action = getattr(reducer, "__name__", repr(reducer))

        try:
            updated = reducer(self._document, *args, **kwargs)
        except ReducerError as e:
            self._activity_logger.log_action_rejected(action, str(e))
            return False

        self._document = updated
        self._persistence.save(updated)
        self._activity_logger.log_action_applied(action)
        return True

    def reset(self, now: Optional[datetime] = None) -> LifeDocument:
        """
        Factory reset: erase all stored data and start over.

        Runs unconditionally - asking the user to confirm is the caller's job.
        """
        previous_user_id = self._document.user_id
        self._persistence.clear()
        self._document = _fresh_document(now)
        self._persistence.save(self._document)
        self._activity_logger.log_factory_reset(previous_user_id)
        return self._document


def _fresh_document(now: Optional[datetime] = None) -> LifeDocument:
    return initial_document(
        currency=detect_default_currency(),
        now=now,
        user_id_prefix=get_settings().app.user_id_prefix,
    )


def create_store(
    data_dir: Optional[Union[str, Path]] = None,
    storage: Optional[KeyValueStorage] = None,
    key: Optional[str] = None,
) -> LifeStore:
    """
    Factory function to open the application's store.

    Args:
        data_dir: Directory for the document file. Defaults to the
                  configured data directory.
        storage: Use this backend instead of local files (e.g. InMemoryStorage).
        key: Storage slot name. Defaults to the configured key.

    Returns:
        An open LifeStore
    """
    if storage is None:
        storage = LocalFileStorage(data_dir or get_settings().storage.data_path)

    activity_logger = ActivityLogger()
    persistence = DocumentStore(storage, key=key, activity_logger=activity_logger)
    return LifeStore.open(persistence, activity_logger=activity_logger)
