"""
Document Persistence Adapter

Reads and writes the whole life document to one storage slot as JSON.

DESIGN DECISION: Both directions fail soft.
- load() answers "no document" for anything it cannot use (absent blob,
  corrupt JSON, wrong shape) so the caller can start from a default.
- save() logs a failed write and reports False. It does not retry and
  does not raise; the in-memory document stays authoritative.
"""

import json
from datetime import datetime
from typing import Optional

import structlog
from pydantic import ValidationError

from lifebooster.audit import ActivityLogger
from lifebooster.config import get_settings
from lifebooster.models.document import LifeDocument
from lifebooster.models.entities import utc_now
from lifebooster.services.storage.interface import KeyValueStorage, StorageError
from lifebooster.services.storage.upgrade import upgrade_document


logger = structlog.get_logger(__name__)


class DocumentStore:
    """Persistence adapter between a LifeDocument and a key-value slot."""

    def __init__(
        self,
        storage: KeyValueStorage,
        key: Optional[str] = None,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        """
        Args:
            storage: Backend holding the serialized document
            key: Storage slot name. Defaults to the configured storage key.
            activity_logger: Where load/save failures are reported.
                             If None, failures are logged locally only.
        """
        self._storage = storage
        self._key = key or get_settings().storage.storage_key
        self._activity_logger = activity_logger

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> Optional[LifeDocument]:
        """
        Read the stored document.

        Returns:
            The upgraded, validated document, or None if nothing usable is stored
        """
        try:
            blob = self._storage.get_item(self._key)
        except StorageError as e:
            self._load_failed(f"storage read failed: {e}")
            return None

        if blob is None:
            logger.debug("document_absent", key=self._key)
            return None

        try:
            raw = json.loads(blob)
        except json.JSONDecodeError as e:
            self._load_failed(f"invalid JSON: {e}")
            return None

        if not isinstance(raw, dict):
            self._load_failed(f"expected a JSON object, got {type(raw).__name__}")
            return None

        try:
            return LifeDocument.model_validate(upgrade_document(raw))
        except ValidationError as e:
            self._load_failed(f"schema mismatch: {e.error_count()} error(s): {e}")
            return None

    def save(self, document: LifeDocument) -> bool:
        """
        Overwrite the stored document.

        Returns:
            True if the write succeeded
        """
        try:
            self._storage.set_item(self._key, document.to_json())
        except StorageError as e:
            if self._activity_logger:
                self._activity_logger.log_save_failed(self._key, str(e))
            else:
                logger.error("document_save_failed", key=self._key, error=str(e))
            return False
        return True

    def back_up(self, now: Optional[datetime] = None) -> Optional[str]:
        """
        Copy the raw stored blob to a side slot, untouched.

        Called before an unusable document is replaced, so whatever the user
        had can still be recovered by hand. Backup keys carry the time, so a
        later backup does not replace an earlier one.

        Returns:
            The backup key, or None if nothing is stored or the copy failed
        """
        stamp = (now or utc_now()).strftime("%Y%m%dT%H%M%S")
        backup_key = f"{self._key}.corrupt-{stamp}"
        try:
            blob = self._storage.get_item(self._key)
            if blob is None:
                return None
            self._storage.set_item(backup_key, blob)
        except StorageError as e:
            logger.error("document_backup_failed", key=self._key, error=str(e))
            return None

        if self._activity_logger:
            self._activity_logger.log_document_backed_up(self._key, backup_key)
        else:
            logger.warning("document_backed_up", key=self._key, backup_key=backup_key)
        return backup_key

    def clear(self) -> bool:
        """
        Remove the stored document entirely.

        Returns:
            True if the slot is now empty
        """
        try:
            self._storage.remove_item(self._key)
        except StorageError as e:
            logger.error("document_clear_failed", key=self._key, error=str(e))
            return False
        return True

    def _load_failed(self, reason: str) -> None:
        if self._activity_logger:
            self._activity_logger.log_load_failed(self._key, reason)
        else:
            logger.warning("document_load_failed", key=self._key, error=reason)
