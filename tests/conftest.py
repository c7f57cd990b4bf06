from datetime import datetime, timedelta

import pytest

from work_calendar.data import EventStore, IdSequence
from work_calendar.domain import Event

T0 = datetime(2025, 3, 3, 9, 0)


class FrozenClock:
    def __init__(self, value: int = 1_700_000_000_000) -> None:
        self.value = value

    def __call__(self) -> int:
        return self.value


def make_event(category: str, hours: float, *, title: str = "", start: datetime = T0) -> Event:
    return Event(id="", title=title, category=category, start=start, end=start + timedelta(hours=hours))


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def store(clock: FrozenClock) -> EventStore:
    return EventStore(ids=IdSequence(clock=clock))
