"""
JSON file storage for the attendance record set.

The whole record set lives in one JSON array on local disk.  This
module provides ``RecordStore``, the only component that touches that
file: ``load`` returns the full list and ``save`` rewrites it.  A
missing file is treated as an empty record set.  Any other failure
(permissions, full disk, malformed content) is raised as
``StorageError``.

File I/O runs in a worker thread so that a slow disk does not stall
the event loop.  Writes are not atomic: a crash in the middle of
``save`` can leave a truncated file behind.

The store also owns an ``asyncio.Lock``.  Code that loads, modifies
and saves the record set must hold it for the whole sequence,
otherwise two concurrent requests can overwrite each other's changes.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from fastapi import Request

from .exceptions import StorageError


logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class RecordStore:
    """Load and save the record set kept in a single JSON file."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.lock = asyncio.Lock()

    async def load(self) -> List[Record]:
        """Return every stored record in insertion order."""
        return await asyncio.to_thread(self._read)

    async def save(self, records: List[Record]) -> None:
        """Overwrite the file with ``records``."""
        await asyncio.to_thread(self._write, list(records))

    def _ensure_directory(self) -> None:
        try:
            os.makedirs(self.path.parent, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create data directory {self.path.parent}: {exc}") from exc

    def _read(self) -> List[Record]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Malformed JSON in {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise StorageError(f"Expected a JSON array in {self.path}, got {type(data).__name__}")
        for position, item in enumerate(data):
            if not isinstance(item, dict):
                raise StorageError(f"Record {position} in {self.path} is a {type(item).__name__}, not an object")
        return data

    def _write(self, records: List[Record]) -> None:
        self._ensure_directory()
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Wrote %d records to %s", len(records), self.path)


def get_store(request: Request) -> RecordStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
