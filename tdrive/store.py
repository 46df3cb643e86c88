"""
Session Store

File-backed collection of practice-session records. The whole collection is
one JSON array; every read loads the full file and every mutation rewrites it.

Read-modify-write sequences are serialized with a lock held by the store, and
writes land through a temp file plus os.replace, so a crashed write never
leaves a half-written collection behind. This covers a single server process
only.
"""

import json
import logging
import os
import tempfile
import threading
from typing import List, Optional

from tdrive import config

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Backing file could not be read, parsed or written."""


class SessionStore:
    """Persist session records to a single JSON file."""

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """First-run setup: create the data directory and an empty collection."""
        with self._lock:
            if os.path.exists(self.path):
                return
            directory = os.path.dirname(os.path.abspath(self.path))
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as e:
                raise StorageError(f"Cannot create data directory {directory}: {e}") from e
            self._write([])
            logger.info(f"Created empty session collection at {self.path}")

    def load(self) -> List[dict]:
        """Return the full collection of session records."""
        with self._lock:
            return self._read()

    def get(self, session_id: str) -> Optional[dict]:
        """Return the record with this id, or None."""
        with self._lock:
            for record in self._read():
                if record.get("id") == session_id:
                    return record
        return None

    def append(self, record: dict) -> dict:
        """Add one record and persist the complete collection."""
        with self._lock:
            sessions = self._read()
            sessions.append(record)
            self._write(sessions)
        return record

    def delete(self, session_id: str) -> bool:
        """
        Remove at most one record with the given id.

        Returns:
            True if a record was removed, False if none matched.
        """
        with self._lock:
            sessions = self._read()
            for index, record in enumerate(sessions):
                if record.get("id") == session_id:
                    del sessions[index]
                    self._write(sessions)
                    return True
        return False

    def _read(self) -> List[dict]:
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                raw = handle.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not raw.strip():
            return []

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Malformed JSON in {self.path}: {e}") from e

        if not isinstance(parsed, list):
            raise StorageError(
                f"Expected a JSON array in {self.path}, found {type(parsed).__name__}"
            )
        return parsed

    def _write(self, sessions: List[dict]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".sessions-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(sessions, handle, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Cannot write {self.path}: {e}") from e


_store: Optional[SessionStore] = None
_store_lock = threading.Lock()


def get_store() -> SessionStore:
    """Dependency for FastAPI routes to get the process-wide session store."""
    global _store
    with _store_lock:
        if _store is None:
            _store = SessionStore(config.DATA_FILE)
        return _store


def init_store() -> SessionStore:
    """Create the store and its backing file at startup."""
    store = get_store()
    store.initialize()
    return store
