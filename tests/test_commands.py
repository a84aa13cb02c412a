"""Tests for the stamplog command-line surface."""

import csv

import pytest
import pytz
from typer.testing import CliRunner

from stamplog.database.repositories import PreferencesRepository, TimestampRepository
from stamplog.main import build_app
from stamplog.services import TimestampTracker
from tests.conftest import StepClock

runner = CliRunner()


@pytest.fixture
def make_app(tmp_path):
    """Build a fresh app over the same storage, as separate CLI runs would."""
    clock = StepClock(1_500, 2_000, 3_000)

    def _make():
        repo = TimestampRepository(data_path=tmp_path / "timestamps.json", max_records=100)
        tracker = TimestampTracker(repo, clock=clock)
        return build_app(
            prefs_path=tmp_path / "preferences.json",
            export_path=tmp_path / "timestamps.csv",
            tracker=tracker,
            locale="en_US",
            tz=pytz.UTC,
        )

    return _make


def _invoke(make_app, *args: str, **kwargs):
    return runner.invoke(make_app(), list(args), **kwargs)


class TestAddAndList:
    def test_add(self, make_app) -> None:
        result = _invoke(make_app, "add")

        assert result.exit_code == 0
        assert "Recorded Jun 20, 2025, 2:03:05" in result.output
        assert "(123ms)" in result.output

    def test_add_with_note_shows_interval(self, make_app) -> None:
        _invoke(make_app, "add")
        result = _invoke(make_app, "add", "--note", "lap 1")

        assert result.exit_code == 0
        assert "Interval: 1s 500ms" in result.output
        assert "Note: lap 1" in result.output

    def test_list_empty(self, make_app) -> None:
        result = _invoke(make_app, "list")

        assert result.exit_code == 0
        assert "No timestamps recorded yet." in result.output

    def test_list_newest_first(self, make_app) -> None:
        _invoke(make_app, "add", "--note", "first")
        _invoke(make_app, "add", "--note", "second")

        result = _invoke(make_app, "list")

        assert result.exit_code == 0
        assert result.output.index("second") < result.output.index("first")
        assert "  1. Jun 20, 2025, 2:03:06" in result.output
        assert "Interval: 1s 500ms" in result.output

    def test_list_without_milliseconds(self, make_app) -> None:
        _invoke(make_app, "add")
        _invoke(make_app, "add")

        result = _invoke(make_app, "list", "--no-ms")

        assert result.exit_code == 0
        assert "ms" not in result.output
        assert "Interval: 2s" in result.output


class TestNoteDeleteClear:
    def test_note(self, make_app, tmp_path) -> None:
        _invoke(make_app, "add")

        result = _invoke(make_app, "note", "1", "checked in")

        assert result.exit_code == 0
        assert "Note saved for #1." in result.output
        assert TimestampRepository(tmp_path / "timestamps.json").load()[0].note == "checked in"

    def test_note_removed(self, make_app) -> None:
        _invoke(make_app, "add", "--note", "temp")

        result = _invoke(make_app, "note", "1")

        assert "Note removed from #1." in result.output

    def test_note_bad_position(self, make_app) -> None:
        result = _invoke(make_app, "note", "5", "x")

        assert result.exit_code == 1
        assert "No timestamp at position 5." in result.output

    def test_delete(self, make_app, tmp_path) -> None:
        _invoke(make_app, "add", "--note", "old")
        _invoke(make_app, "add", "--note", "new")

        result = _invoke(make_app, "delete", "2")

        assert result.exit_code == 0
        records = TimestampRepository(tmp_path / "timestamps.json").load()
        assert [r.note for r in records] == ["new"]

    def test_clear_with_yes(self, make_app, tmp_path) -> None:
        _invoke(make_app, "add")

        result = _invoke(make_app, "clear", "--yes")

        assert result.exit_code == 0
        assert not (tmp_path / "timestamps.json").exists()

    def test_clear_cancelled(self, make_app, tmp_path) -> None:
        _invoke(make_app, "add")

        result = _invoke(make_app, "clear", input="n\n")

        assert "Cancelled." in result.output
        assert (tmp_path / "timestamps.json").exists()

    def test_clear_confirmed(self, make_app, tmp_path) -> None:
        _invoke(make_app, "add")

        result = _invoke(make_app, "clear", input="y\n")

        assert "All timestamps cleared." in result.output
        assert not (tmp_path / "timestamps.json").exists()

    def test_clear_failure_is_reported(self, make_app, tmp_path) -> None:
        _invoke(make_app, "add")
        data_path = tmp_path / "timestamps.json"
        data_path.unlink()
        data_path.mkdir()
        (data_path / "keep").write_text("x", encoding="utf-8")

        result = _invoke(make_app, "clear", "--yes")

        assert result.exit_code == 1
        assert "Could not clear the timestamp log." in result.output
        assert "All timestamps cleared." not in result.output
        assert data_path.exists()


class TestExport:
    def test_export_default_path(self, make_app, tmp_path) -> None:
        _invoke(make_app, "add")
        _invoke(make_app, "add", "--note", 'a "quoted" note')

        result = _invoke(make_app, "export")

        assert result.exit_code == 0
        with open(tmp_path / "timestamps.csv", encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        assert rows == [
            ["Timestamp", "Interval", "Note"],
            ["2025-06-20 14:03:06.623", "1s 500ms", 'a "quoted" note'],
            ["2025-06-20 14:03:05.123", "", ""],
        ]

    def test_export_options(self, make_app, tmp_path) -> None:
        _invoke(make_app, "add")
        target = tmp_path / "out" / "log.csv"

        result = _invoke(make_app, "export", "--output", str(target), "--no-ms", "--display")

        assert result.exit_code == 0
        content = target.read_text(encoding="utf-8")
        assert "Jun 20, 2025, 2:03:05" in content
        assert "(123ms)" not in content

    def test_export_empty(self, make_app, tmp_path) -> None:
        result = _invoke(make_app, "export")

        assert result.exit_code == 1
        assert "No timestamps to export." in result.output
        assert not (tmp_path / "timestamps.csv").exists()


class TestSettings:
    def test_show_current(self, make_app) -> None:
        result = _invoke(make_app, "settings")
        assert "Show milliseconds: on" in result.output

    def test_toggle_persists_and_affects_list(self, make_app, tmp_path) -> None:
        _invoke(make_app, "add")

        result = _invoke(make_app, "settings", "--hide-ms")
        assert "Show milliseconds: off" in result.output
        assert PreferencesRepository(tmp_path / "preferences.json").get_show_milliseconds() is False

        listing = _invoke(make_app, "list")
        assert "(123ms)" not in listing.output

        override = _invoke(make_app, "list", "--ms")
        assert "(123ms)" in override.output
