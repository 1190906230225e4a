"""
Service layer for attendance records.

``RecordService`` implements the three record operations on top of a
``RecordStore``: listing the record set, appending a check-in and
deleting check-ins by timestamp.  Create and delete hold the store
lock across the whole load/modify/save sequence so concurrent requests
in this process cannot lose each other's updates.

Storage failures are logged here with the operation that triggered
them and re-raised as ``StorageError`` carrying the client-facing
message.
"""

import logging
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from attendance_api.app.core.exceptions import NotFoundError, StorageError, ValidationError
from attendance_api.app.core.formatting import (
    current_instant,
    format_login_date,
    format_login_time,
    to_epoch_millis,
)
from attendance_api.app.core.storage import Record, RecordStore
from attendance_api.app.schemas.record import RecordRead


logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")
_INTEGER = re.compile(r"-?[0-9]+")


def derive_user_id(name: str) -> str:
    """Build the ``userId`` slug: lowercase, whitespace runs become ``-``."""
    return _WHITESPACE_RUN.sub("-", name.strip().lower())


def parse_timestamp(raw: str) -> int:
    """Parse a path segment into an integer timestamp.

    Raises ``ValidationError`` unless the whole segment is an optionally
    signed run of decimal digits.
    """
    if raw is None or not _INTEGER.fullmatch(raw):
        raise ValidationError("Invalid timestamp")
    try:
        return int(raw)
    except ValueError as exc:
        # Digit strings past the interpreter's conversion limit.
        raise ValidationError("Invalid timestamp") from exc


class RecordService:
    """Business logic for check-in records."""

    def __init__(self, store: RecordStore, tz_name: Optional[str] = None) -> None:
        self.store = store
        self.tz_name = tz_name

    async def list_records(self) -> List[Record]:
        """Return the stored records in insertion order."""
        try:
            return await self.store.load()
        except StorageError as exc:
            logger.exception("Error reading records: %s", exc.message)
            raise StorageError("Failed to read records") from exc

    async def create_record(self, name: Optional[str], now: Optional[datetime] = None) -> RecordRead:
        """Append a check-in for ``name`` and return the new record.

        ``now`` overrides the clock; the current instant in the
        configured zone is used otherwise.
        """
        user_name = name.strip() if name is not None else ""
        if not user_name:
            raise ValidationError("Name is required")

        moment = now or current_instant(self.tz_name)
        try:
            async with self.store.lock:
                records = await self.store.load()
                record = RecordRead(
                    user_name=user_name,
                    user_id=derive_user_id(user_name),
                    login_date=format_login_date(moment),
                    login_time=format_login_time(moment),
                    timestamp=self._next_timestamp(records, to_epoch_millis(moment)),
                )
                records.append(record.model_dump(by_alias=True))
                await self.store.save(records)
        except StorageError as exc:
            logger.exception("Error creating record for %r: %s", user_name, exc.message)
            raise StorageError("Failed to create record") from exc

        logger.info("Recorded check-in for %s at %s", record.user_id, record.timestamp)
        return record

    async def delete_record(self, raw_timestamp: str) -> Dict[str, Any]:
        """Remove every record stamped with the given timestamp.

        Raises ``ValidationError`` for a malformed timestamp and
        ``NotFoundError`` when nothing matched; the file is left
        untouched in both cases.
        """
        timestamp = parse_timestamp(raw_timestamp)
        try:
            async with self.store.lock:
                records = await self.store.load()
                remaining = [record for record in records if record.get("timestamp") != timestamp]
                if len(remaining) == len(records):
                    raise NotFoundError("Record not found")
                await self.store.save(remaining)
        except StorageError as exc:
            logger.exception("Error deleting record %s: %s", timestamp, exc.message)
            raise StorageError("Failed to delete record") from exc

        logger.info("Deleted %d record(s) with timestamp %s", len(records) - len(remaining), timestamp)
        return {"message": "Record deleted successfully"}

    @staticmethod
    def _next_timestamp(records: List[Record], clock_millis: int) -> int:
        # Start from the clock and step past any value already taken.  A
        # stored timestamp ahead of the clock does not push new ones forward.
        taken = {record.get("timestamp") for record in records}
        timestamp = clock_millis
        while timestamp in taken:
            timestamp += 1
        return timestamp
