"""A single JSON document acting as the storage engine.

Every table lives in one document so that a multi-row change (an order
header, its details and the stock it consumed) is one file write.  Writes
go to a temporary file in the same directory which is fsynced and then
renamed over the document; a crash leaves either the old or the new
document on disk, never a mix.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ordercore.domain.exceptions import StorageError

logger = logging.getLogger(__name__)

TABLES = ("categories", "products", "customers", "orders", "sale_history")


def next_id(rows: list[dict]) -> int:
    if not rows:
        return 1
    return max(row["id"] for row in rows) + 1


class JsonDocumentStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read(self) -> dict:
        """Return a private copy of the current document."""
        with self._lock:
            return self._load()

    @contextmanager
    def transaction(self) -> Iterator[dict]:
        """Yield the document for modification and write it back on exit.

        Writers are serialised.  If the body raises, nothing is written.
        """
        with self._lock:
            document = self._load()
            yield document
            self._persist(document)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        try:
            document = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(document, dict):
            raise StorageError(f"{self._file_path} does not hold a JSON object")
        for table in TABLES:
            document.setdefault(table, [])
        return document

    def _persist(self, document: dict) -> None:
        payload = json.dumps(document, indent=2) + "\n"
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._file_path.name}.", dir=self._file_path.parent
            )
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc
        self._fsync_directory()
        logger.debug("Wrote %s (%d bytes)", self._file_path, len(payload))

    def _fsync_directory(self) -> None:
        """Make the rename itself durable.

        The new document is already in place when this runs, so a failure
        here is logged rather than raised: callers must not undo a write
        that readers can see.
        """
        if os.name != "posix":
            return
        try:
            dir_fd = os.open(self._file_path.parent, os.O_RDONLY)
            try:
                os.fsync(dir_fd)
            finally:
                os.close(dir_fd)
        except OSError as exc:
            logger.warning("Cannot fsync directory of %s: %s", self._file_path, exc)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageError(
                    f"Cannot create data directory {self._file_path.parent}: {exc}"
                ) from exc
            with self._lock:
                self._persist({table: [] for table in TABLES})
