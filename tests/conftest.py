import datetime
import logging
import os
import types

import pytest
import schedule

# Qt widgets are created without a display unless one is configured
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


class SimulatedClock:
    """
    Stands in for wall-clock time inside ``schedule``.
    """

    def __init__(self, start: datetime.datetime):
        self.now: datetime.datetime = start

    def advance(self, delta: datetime.timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock(monkeypatch):
    sim = SimulatedClock(datetime.datetime(2024, 4, 18, 9, 0, 0))

    class SimulatedDatetime(datetime.datetime):
        @classmethod
        def now(cls, tz=None):
            return sim.now if tz is None else sim.now.replace(tzinfo=tz)

    fake_datetime = types.SimpleNamespace(
        datetime=SimulatedDatetime,
        timedelta=datetime.timedelta,
        time=datetime.time,
        date=datetime.date,
        timezone=datetime.timezone
    )
    monkeypatch.setattr(schedule, 'datetime', fake_datetime)
    return sim


@pytest.fixture
def reset_logging():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
