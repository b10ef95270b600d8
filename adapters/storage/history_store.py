"""
Key-value stores for the check-in history.

Both stores keep the history as JSON text under a single key, mirroring the
browser storage the records were originally written to, so a record that
round-trips through one store round-trips through the other.
"""

import json
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog

from assessment.domain.errors import PersistenceError

logger = structlog.get_logger(__name__)

DEFAULT_STORAGE_KEY = "innerPeaceQuizHistory"


class InMemoryHistoryStore:
    """Dict-backed store. Useful for tests and for embedding without a disk."""

    def __init__(self, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.key = key
        self.items: dict[str, str] = {}
        self.save_count = 0

    def load(self) -> list[dict[str, Any]]:
        raw = self.items.get(self.key)
        if raw is None:
            return []
        return json.loads(raw)

    def save(self, records: Sequence[dict[str, Any]]) -> None:
        self.items[self.key] = json.dumps(list(records))
        self.save_count += 1


class JsonFileHistoryStore:
    """
    A JSON object file used as a key-value store.

    Writes go to a temporary file in the same directory and are moved into place
    with ``os.replace``, so a crash mid-write never leaves a truncated history.
    Keys other than ours are preserved, and a file that cannot be read is never
    replaced.
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.path = Path(path)
        self.key = key
        self.logger = logger.bind(store="json_file", path=str(self.path), key=key)

    def _read_document(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        document = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(document, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return document

    def load(self) -> list[dict[str, Any]]:
        document = self._read_document()
        records = document.get(self.key, [])
        # Values may be stored as JSON text, the way browser storage keeps them
        if isinstance(records, str):
            records = json.loads(records)
        self.logger.debug("history_read", records=len(records))
        return records

    def save(self, records: Sequence[dict[str, Any]]) -> None:
        try:
            document = self._read_document()
        except (OSError, ValueError) as e:
            self.logger.error("history_document_unreadable", error=str(e))
            raise PersistenceError(
                f"Refusing to overwrite unreadable {self.path}: {e}"
            ) from e

        document[self.key] = list(records)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(document, handle, indent=2, ensure_ascii=False)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            self.logger.error("history_write_failed", error=str(e))
            raise PersistenceError(f"Failed to write {self.path}: {e}") from e

        self.logger.debug("history_written", records=len(records))
