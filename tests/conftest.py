from datetime import datetime, timedelta, timezone

import pytest

from stamplog.database.repositories import PreferencesRepository, TimestampRepository
from stamplog.services import TimestampTracker

BASE_TIME = datetime(2025, 6, 20, 14, 3, 5, 123000, tzinfo=timezone.utc)


class StepClock:
    """Clock returning BASE_TIME, then advancing by the queued steps."""

    def __init__(self, *steps_ms: int) -> None:
        self.current = BASE_TIME
        self.steps = list(steps_ms)
        self.calls = 0

    def __call__(self) -> datetime:
        if self.calls:
            step = self.steps.pop(0) if self.steps else 1000
            self.current = self.current + timedelta(milliseconds=step)
        self.calls += 1
        return self.current


@pytest.fixture
def repo(tmp_path):
    return TimestampRepository(data_path=tmp_path / "timestamps.json", max_records=100)


@pytest.fixture
def prefs(tmp_path):
    return PreferencesRepository(prefs_path=tmp_path / "preferences.json", default_show_milliseconds=True)


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def tracker(repo, clock):
    t = TimestampTracker(repo, clock=clock)
    t.load()
    return t
