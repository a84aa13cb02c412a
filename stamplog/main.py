"""
Command-line entry point with initialization and wiring.

This module builds the services (storage, tracker, exporter), registers
the command handlers and runs the typer application.
"""

import logging
from pathlib import Path
import typer
from stamplog.config.settings import Settings
from stamplog.core.logger import setup_logger, make_tracer
from stamplog.database.repositories import PreferencesRepository, TimestampRepository
from stamplog.handlers import register_commands
from stamplog.services import CsvExporter, TimestampTracker
from stamplog.utils.formatters import IntervalFormatter

logger = logging.getLogger(__name__)


def build_app(
    data_path: Path = Settings.DATA_FILE,
    prefs_path: Path = Settings.PREFS_FILE,
    export_path: Path = Settings.EXPORT_FILE,
    max_records: int = Settings.MAX_RECORDS,
    tracker: TimestampTracker = None,
    locale: str = Settings.LOCALE,
    tz=Settings.LOCAL_TZ,
) -> typer.Typer:
    """
    Create the typer application with all services wired in.

    Initialization steps:
    1. Create repositories for the log and preferences
    2. Create the interval formatter (traced when TRACING_ENABLED)
    3. Load the log into the tracker
    4. Register command handlers

    Args:
        data_path: JSON file holding the timestamp log
        prefs_path: JSON file holding display preferences
        export_path: Default CSV output file
        max_records: Maximum number of records kept
        tracker: Pre-built tracker (tests inject one with a fixed clock)
        locale: Locale for on-screen timestamps
        tz: Time zone for rendering (None means host local time)

    Returns:
        Typer application ready to be invoked
    """
    if tracker is None:
        repo = TimestampRepository(data_path=data_path, max_records=max_records)
        intervals = IntervalFormatter(trace=make_tracer(Settings.TRACING_ENABLED))
        tracker = TimestampTracker(repo, intervals)
    tracker.load()

    prefs = PreferencesRepository(prefs_path=prefs_path)
    exporter = CsvExporter(tracker, export_path=export_path)

    app = typer.Typer(
        name="stamplog",
        help="Record instants and review the intervals between them.",
        no_args_is_help=True,
    )
    register_commands(app, tracker, exporter, prefs, locale=locale, tz=tz)
    return app


def main() -> None:
    """Console script entry point."""
    setup_logger()
    logger.info("Starting stamplog")
    app = build_app()
    app()


if __name__ == '__main__':
    main()
