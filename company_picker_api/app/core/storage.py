"""
Flat JSON file persistence for the catalog and the user's selection.

Each resource lives in its own file holding a single top‑level JSON
array.  ``CompanyStore`` is the interface the services depend on; the
only implementation, ``JsonFileStore``, reads and writes those files.
Swapping in a real datastore means providing another ``CompanyStore``
and wiring it in ``create_app``.

Reads never fall back to a default: a missing, unreadable or malformed
file raises ``StorageError`` so that the API can answer with a server
error instead of returning partial data.  ``ensure_files`` is called at
startup to create missing files with ``[]``.
"""

import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List

from fastapi import Request

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a backing file cannot be read, parsed or written."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class CompanyStore(ABC):
    """Persistence interface used by the catalog and selection services."""

    @abstractmethod
    def ensure_files(self) -> None:
        """Create any missing backing resource with an empty array."""

    @abstractmethod
    def load_catalog(self) -> List[Any]:
        """Return the master company catalog."""

    @abstractmethod
    def load_selection(self) -> List[Any]:
        """Return the last persisted selection."""

    @abstractmethod
    def save_selection(self, items: List[Any]) -> None:
        """Replace the persisted selection with ``items``."""


class JsonFileStore(CompanyStore):
    """``CompanyStore`` backed by two JSON files.

    Writes go to a temporary file in the same directory which is then
    renamed over the target, so a reader never sees a half‑written
    file.  A process‑wide lock serializes writers.
    """

    def __init__(self, companies_path: Path, selections_path: Path) -> None:
        self.companies_path = Path(companies_path)
        self.selections_path = Path(selections_path)
        self._write_lock = threading.Lock()

    def ensure_files(self) -> None:
        for path in (self.companies_path, self.selections_path):
            if path.exists():
                continue
            logger.info("Creating %s with an empty list", path)
            self._write(path, [])

    def load_catalog(self) -> List[Any]:
        return self._read(self.companies_path)

    def load_selection(self) -> List[Any]:
        return self._read(self.selections_path)

    def save_selection(self, items: List[Any]) -> None:
        self._write(self.selections_path, items)
        logger.info("Saved %d selected companies to %s", len(items), self.selections_path)

    # ------------------------------------------------------------------
    # File helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _read(path: Path) -> List[Any]:
        try:
            with path.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Could not read {path}: {exc}", path) from exc

    def _write(self, path: Path, data: Any) -> None:
        with self._write_lock:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
            except OSError as exc:
                raise StorageError(f"Could not write {path}: {exc}", path) from exc
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, indent=2)
                os.replace(tmp_path, path)
            except (OSError, TypeError, ValueError) as exc:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
                raise StorageError(f"Could not write {path}: {exc}", path) from exc


def get_store(request: Request) -> CompanyStore:
    """FastAPI dependency returning the store attached to the app."""
    return request.app.state.store
