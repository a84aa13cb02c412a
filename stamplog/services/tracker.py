"""
Timestamp tracker service.

Owns the in-memory record list, applies user actions (add, edit note,
delete, clear) and writes the log back to storage after every mutation.
Also builds the list view: each record with its formatted time and the
interval to the next older record.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional
from stamplog.core.exceptions import RecordNotFoundError, StorageError
from stamplog.database.models import TimestampRecord, new_record_id
from stamplog.database.repositories import TimestampRepository
from stamplog.utils.formatters import (
    FormatOptions,
    IntervalFormatter,
    format_timestamp,
    parse_instant,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """Serialize as ISO-8601 UTC with milliseconds and a 'Z' suffix."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def elapsed_ms(newer: str, older: str) -> int:
    """
    Absolute difference between two ISO instants in whole milliseconds.

    Naive instants (old log entries) are read as host local time.
    """
    delta = abs(parse_instant(newer).astimezone() - parse_instant(older).astimezone())
    return delta // timedelta(milliseconds=1)


@dataclass(frozen=True)
class TimestampRow:
    """One line of the list view."""

    position: int
    record: TimestampRecord
    timestamp: str
    interval: str


class TimestampTracker:
    """
    Apply user actions to the timestamp log.

    Records are kept newest first and capped by the repository's
    max_records. Each action changes at most one record and is persisted
    immediately.

    Example:
        >>> tracker = TimestampTracker(TimestampRepository(), IntervalFormatter())
        >>> tracker.load()
        >>> record = tracker.add("coffee")
        >>> tracker.rows(FormatOptions())[0].record is record
        True
    """

    def __init__(
        self,
        repository: TimestampRepository,
        interval_formatter: Optional[IntervalFormatter] = None,
        clock: Callable[[], datetime] = utc_now
    ) -> None:
        self.repo = repository
        self.intervals = interval_formatter or IntervalFormatter()
        self.clock = clock
        self._records: List[TimestampRecord] = []

    @property
    def records(self) -> List[TimestampRecord]:
        return list(self._records)

    def load(self) -> List[TimestampRecord]:
        self._records = self.repo.load()
        logger.info(f"Loaded {len(self._records)} timestamps")
        return self.records

    def _persist(self) -> None:
        self._records = self._records[:self.repo.max_records]
        if not self.repo.save(self._records):
            logger.warning("Timestamp log could not be saved; changes are kept in memory only")

    def add(self, note: str = "") -> TimestampRecord:
        record = TimestampRecord(id=new_record_id(), time=to_iso(self.clock()), note=note)
        self._records.insert(0, record)
        self._persist()
        logger.info(f"Timestamp added: {record.time}")
        return record

    def get(self, record_id: str) -> TimestampRecord:
        for record in self._records:
            if record.id == record_id:
                return record
        raise RecordNotFoundError("No such timestamp.", f"Unknown record id '{record_id}'")

    def get_by_position(self, position: int) -> TimestampRecord:
        """Return the record at a 1-based list position (1 is the newest)."""
        if not 1 <= position <= len(self._records):
            raise RecordNotFoundError(
                f"No timestamp at position {position}.",
                f"Position {position} out of range 1..{len(self._records)}"
            )
        return self._records[position - 1]

    def update_note(self, record_id: str, note: str) -> TimestampRecord:
        record = self.get(record_id)
        record.note = note
        self._persist()
        logger.info(f"Note updated for {record.time}")
        return record

    def delete(self, record_id: str) -> TimestampRecord:
        record = self.get(record_id)
        self._records.remove(record)
        self._persist()
        logger.info(f"Timestamp deleted: {record.time}")
        return record

    def clear(self) -> None:
        if not self.repo.clear():
            raise StorageError(
                "Could not clear the timestamp log.",
                f"Failed to remove {self.repo.data_path}"
            )
        self._records = []
        logger.info("All timestamps cleared")

    def interval_after(self, index: int, include_milliseconds: bool = True) -> str:
        """
        Interval between the record at index and the next older one.

        Returns an empty string for the oldest record.
        """
        if index + 1 >= len(self._records):
            return self.intervals.format(None)
        delta = elapsed_ms(self._records[index].time, self._records[index + 1].time)
        return self.intervals.format(delta, include_milliseconds)

    def rows(self, options: FormatOptions = FormatOptions()) -> List[TimestampRow]:
        return [
            TimestampRow(
                position=i + 1,
                record=record,
                timestamp=format_timestamp(record.time, options),
                interval=self.interval_after(i, options.include_milliseconds),
            )
            for i, record in enumerate(self._records)
        ]
