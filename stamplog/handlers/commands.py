"""
Command handlers module.

This module registers and implements the command-line actions of the
timestamp log: recording, listing, annotating, deleting, clearing,
exporting, and the persisted milliseconds display toggle.
"""

import logging
from pathlib import Path
from typing import Optional
import typer
from stamplog.config.settings import Settings
from stamplog.database.repositories import PreferencesRepository
from stamplog.handlers.error_handler import handle_error
from stamplog.services import CsvExporter, TimestampTracker
from stamplog.utils.formatters import FormatOptions

logger = logging.getLogger(__name__)


def register_commands(
    app: typer.Typer,
    tracker: TimestampTracker,
    exporter: CsvExporter,
    prefs: PreferencesRepository,
    locale: str = Settings.LOCALE,
    tz=Settings.LOCAL_TZ,
) -> None:
    """
    Register command handlers with the typer application.

    Args:
        app: Typer application to register commands with
        tracker: Loaded tracker holding the timestamp log
        exporter: CSV exporter bound to the same tracker
        prefs: Repository for the persisted milliseconds toggle
        locale: Locale used for on-screen timestamps
        tz: Time zone for rendering (None means host local time)

    Note:
        - Handlers are registered as nested functions (closures)
        - Every handler routes failures through handle_error
    """

    def display_options(show_ms: Optional[bool]) -> FormatOptions:
        include = prefs.get_show_milliseconds() if show_ms is None else show_ms
        return FormatOptions(include_milliseconds=include, locale=locale, tz=tz)

    @app.command("add")
    def cmd_add(
        note: str = typer.Option("", "--note", "-n", help="Note to attach to the new timestamp"),
    ) -> None:
        """Record the current instant."""
        try:
            record = tracker.add(note)
            row = tracker.rows(display_options(None))[0]
        except Exception as e:
            handle_error(e, "while adding a timestamp")
            return
        typer.echo(f"Recorded {row.timestamp}")
        if row.interval:
            typer.echo(f"Interval: {row.interval}")
        if record.note:
            typer.echo(f"Note: {record.note}")

    @app.command("list")
    def cmd_list(
        show_ms: Optional[bool] = typer.Option(
            None, "--ms/--no-ms", help="Override the saved milliseconds setting"
        ),
    ) -> None:
        """Show recorded timestamps, newest first."""
        try:
            rows = tracker.rows(display_options(show_ms))
        except Exception as e:
            handle_error(e, "while listing timestamps")
            return
        if not rows:
            typer.echo("No timestamps recorded yet.")
            return
        for row in rows:
            typer.echo(f"{row.position:>3}. {row.timestamp}")
            if row.interval:
                typer.echo(f"     Interval: {row.interval}")
            if row.record.note:
                typer.echo(f"     Note: {row.record.note}")

    @app.command("note")
    def cmd_note(
        position: int = typer.Argument(..., help="Position shown by 'list' (1 is the newest)"),
        text: str = typer.Argument("", help="Note text; empty removes the note"),
    ) -> None:
        """Set or replace the note of a timestamp."""
        try:
            record = tracker.get_by_position(position)
            tracker.update_note(record.id, text)
        except Exception as e:
            handle_error(e, "while saving the note")
            return
        typer.echo(f"Note saved for #{position}." if text else f"Note removed from #{position}.")

    @app.command("delete")
    def cmd_delete(
        position: int = typer.Argument(..., help="Position shown by 'list' (1 is the newest)"),
    ) -> None:
        """Delete a single timestamp."""
        try:
            record = tracker.get_by_position(position)
            tracker.delete(record.id)
        except Exception as e:
            handle_error(e, "while deleting a timestamp")
            return
        typer.echo(f"Deleted #{position}.")

    @app.command("clear")
    def cmd_clear(
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    ) -> None:
        """Delete all timestamps."""
        if not yes and not typer.confirm("Clear all timestamps?"):
            typer.echo("Cancelled.")
            return
        try:
            tracker.clear()
        except Exception as e:
            handle_error(e, "while clearing timestamps")
            return
        typer.echo("All timestamps cleared.")

    @app.command("export")
    def cmd_export(
        output: Optional[Path] = typer.Option(None, "--output", "-o", help="CSV file to write"),
        include_ms: bool = typer.Option(
            Settings.EXPORT_MILLISECONDS, "--ms/--no-ms", help="Include milliseconds in the export"
        ),
        display: bool = typer.Option(
            False, "--display", help="Use the on-screen timestamp format instead of YYYY-MM-DD HH:MM:SS"
        ),
    ) -> None:
        """Export the log as CSV."""
        options = FormatOptions(
            include_milliseconds=include_ms,
            locale=locale,
            export_mode=not display,
            tz=tz,
        )
        try:
            path = exporter.export(options, output)
        except Exception as e:
            handle_error(e, "while exporting")
            return
        typer.echo(f"Exported {len(tracker.records)} timestamps to {path}")

    @app.command("settings")
    def cmd_settings(
        show_ms: Optional[bool] = typer.Option(
            None, "--show-ms/--hide-ms", help="Show milliseconds in the list"
        ),
    ) -> None:
        """Show or change display settings."""
        if show_ms is not None and not prefs.set_show_milliseconds(show_ms):
            handle_error(OSError(f"Could not write {prefs.prefs_path}"), "while saving settings")
            return
        state = "on" if prefs.get_show_milliseconds() else "off"
        typer.echo(f"Show milliseconds: {state}")
