# src/storage_domain/infrastructure/persistence/json_file_key_value_store.py
"""On-device key/value store backed by a single JSON document."""

import json
import logging
import os
import tempfile
from threading import Lock
from typing import Optional

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import StorageError
from src.storage_domain.domain.repositories.key_value_store import IKeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(IKeyValueStore):
    """Keeps every key in one JSON object on disk; each set rewrites the file atomically."""

    def __init__(self, file_path: str | None = None) -> None:
        self.file_path = file_path or settings.STORAGE_FILE_PATH
        self._lock = Lock()

    def _read_document(self) -> dict[str, str]:
        if not os.path.exists(self.file_path):
            return {}
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Failed to read storage file {self.file_path}: {e}", original_exception=e)

        if not isinstance(document, dict):
            raise StorageError(f"Storage file {self.file_path} does not contain a JSON object")
        return document

    def get(self, key: str) -> Optional[str]:
        """Returns the value stored under key, or None."""
        with self._lock:
            value = self._read_document().get(key)
        if value is not None and not isinstance(value, str):
            return json.dumps(value)
        return value

    def set(self, key: str, value: str) -> None:
        """Stores value under key, replacing the file through a temporary sibling."""
        with self._lock:
            try:
                document = self._read_document()
            except StorageError as e:
                logger.warning(f"Discarding unreadable storage file {self.file_path}: {e}")
                document = {}
            document[key] = value

            directory = os.path.dirname(os.path.abspath(self.file_path))
            tmp_path = None
            try:
                os.makedirs(directory, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, ensure_ascii=False)
                os.replace(tmp_path, self.file_path)
            except (OSError, TypeError, ValueError) as e:
                if tmp_path is not None and os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise StorageError(f"Failed to write key '{key}' to {self.file_path}: {e}", original_exception=e)
        logger.debug(f"Stored key '{key}' in {self.file_path}")
