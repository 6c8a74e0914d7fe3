"""
Local File Storage Implementation

DESIGN DECISION: Each key is one JSON file in a data directory.
1. The user's data never leaves the device
2. The file is readable and easy to back up by hand
3. Writes go to a temp file first and are swapped in with os.replace,
   so a crash mid-write leaves the previous document intact

TRADEOFFS:
- One writer only; there is no file locking
- The whole document is rewritten on every change (fine at personal scale)
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import structlog

from lifebooster.services.storage.interface import KeyValueStorage, StorageError


logger = structlog.get_logger(__name__)


class LocalFileStorage(KeyValueStorage):
    """Key-value storage backed by files in one directory."""

    def __init__(self, data_dir: Union[str, Path]):
        self._data_dir = Path(data_dir).expanduser()

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, key: str) -> Path:
        """File that holds `key`."""
        if not key or "/" in key or "\\" in key or key in (".", ".."):
            raise StorageError(f"Invalid storage key: {key!r}", key=key)
        return self._data_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {path}: {e}", key=key) from e

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._data_dir, prefix=f".{key}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    tmp.write(value)
                    tmp.flush()
                    os.fsync(tmp.fileno())
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Could not write {path}: {e}", key=key) from e

        logger.debug("storage_item_written", key=key, path=str(path), size=len(value))

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Could not remove {path}: {e}", key=key) from e
