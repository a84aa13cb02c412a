"""
Timestamp repository module.

This module provides file-based persistence for the timestamp log,
using a JSON array with UTF-8 encoding, newest record first.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional
from stamplog.config.settings import Settings
from stamplog.database.models import TimestampRecord, new_record_id
from stamplog.utils.formatters import parse_instant

logger = logging.getLogger(__name__)


class TimestampRepository:
    """
    Repository for the timestamp log stored as a JSON array.

    Reads and writes the ordered record list, enforcing the maximum
    record count on every write.

    Attributes:
        data_path (Path): Path to the JSON data file
        max_records (int): Maximum number of records kept (oldest dropped first)

    Example:
        >>> repo = TimestampRepository()
        >>> repo.save([TimestampRecord(id="a1", time="2025-06-20T14:03:05.123Z")])
        True
        >>> repo.load()[0].time
        '2025-06-20T14:03:05.123Z'
    """

    def __init__(
        self,
        data_path: Path = Settings.DATA_FILE,
        max_records: int = Settings.MAX_RECORDS
    ) -> None:
        self.data_path = data_path
        self.max_records = max_records

    def load(self) -> List[TimestampRecord]:
        """
        Load the record list from the JSON file.

        Returns:
            Records newest first. Empty list when the file does not exist
            or cannot be read.

        Note:
            - Old-format entries (bare ISO strings) are upgraded to records
              with a generated id and an empty note
            - Entries missing an id get one; a missing note becomes ""
            - Entries without a parseable time are dropped
        """
        # Nothing stored yet (first run)
        if not self.data_path.exists():
            return []

        try:
            with open(self.data_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            # Log but don't raise - allow graceful degradation
            logger.error(f"Timestamp log read error: {e}")
            return []

        if not isinstance(data, list):
            logger.error(f"Timestamp log has unexpected format: {type(data).__name__}")
            return []

        records = []
        for item in data:
            record = self._to_record(item)
            if record is None:
                logger.warning(f"Dropping malformed timestamp entry: {item!r}")
                continue
            records.append(record)
        return records[:self.max_records]

    @staticmethod
    def _to_record(item: Any) -> Optional[TimestampRecord]:
        if isinstance(item, str):
            item = {"time": item}
        if not isinstance(item, dict) or not isinstance(item.get("time"), str):
            return None
        try:
            parse_instant(item["time"])
        except ValueError:
            return None
        return TimestampRecord(
            id=str(item.get("id") or new_record_id()),
            time=item["time"],
            note=str(item.get("note") or ""),
        )

    def save(self, records: List[TimestampRecord]) -> bool:
        """
        Write the record list to the JSON file, capped at max_records.

        Args:
            records: Records newest first

        Returns:
            True if the log was saved successfully, False on error

        Note:
            - Pretty-prints JSON with 2-space indentation for readability
            - Preserves Unicode characters in notes (ensure_ascii=False)
        """
        data = [record.to_dict() for record in records[:self.max_records]]

        try:
            # ensure parent directories exist before writing
            self.data_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.data_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            return True
        except OSError as e:
            logger.error(f"Timestamp log write error: {e}")
            return False

    def clear(self) -> bool:
        """Remove the data file. Returns False if it could not be removed."""
        try:
            self.data_path.unlink(missing_ok=True)
            return True
        except OSError as e:
            logger.error(f"Timestamp log clear error: {e}")
            return False
