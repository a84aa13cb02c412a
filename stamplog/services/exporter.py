"""
CSV export service.

Builds the three-column Timestamp/Interval/Note CSV from the log and
writes it to a local file.
"""

import csv
import io
import logging
from pathlib import Path
from stamplog.config.settings import Settings
from stamplog.core.exceptions import NothingToExportError
from stamplog.services.tracker import TimestampTracker
from stamplog.utils.formatters import FormatOptions

logger = logging.getLogger(__name__)

CSV_HEADER = ("Timestamp", "Interval", "Note")


class CsvExporter:
    """
    Export the timestamp log as CSV.

    Every field is quoted and embedded quotes are doubled. Rows are newest
    first; the Interval column holds the time since the next older row and
    is empty for the oldest one.

    Attributes:
        tracker (TimestampTracker): Source of records and intervals
        export_path (Path): Default output file
    """

    def __init__(
        self,
        tracker: TimestampTracker,
        export_path: Path = Settings.EXPORT_FILE
    ) -> None:
        self.tracker = tracker
        self.export_path = export_path

    def build_csv(self, options: FormatOptions = FormatOptions(export_mode=True)) -> str:
        """
        Render the log as CSV text.

        Raises:
            NothingToExportError: if the log is empty
        """
        rows = self.tracker.rows(options)
        if not rows:
            raise NothingToExportError("No timestamps to export.")

        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for row in rows:
            writer.writerow((row.timestamp, row.interval, row.record.note))
        return buffer.getvalue()

    def export(
        self,
        options: FormatOptions = FormatOptions(export_mode=True),
        path: Path = None
    ) -> Path:
        """
        Write the CSV to path (default: export_path) and return the path written.

        Raises:
            NothingToExportError: if the log is empty
            OSError: if the file cannot be written
        """
        target = Path(path) if path else self.export_path
        content = self.build_csv(options)

        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, 'w', encoding='utf-8', newline='') as f:
            f.write(content)

        logger.info(f"Exported {len(self.tracker.records)} timestamps to {target}")
        return target
