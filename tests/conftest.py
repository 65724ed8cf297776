from datetime import datetime, timedelta, timezone

import pytest


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def fake_clock():
    return FakeClock(datetime(2025, 6, 14, 10, 0, tzinfo=timezone.utc))
