from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from ..domain import Event

logger = logging.getLogger(__name__)


def _date_range(start: date, end: date) -> Iterable[date]:
    delta = (end - start).days
    for index in range(delta + 1):
        yield start + timedelta(days=index)


def days_of(event: Event) -> set[date]:
    """Calendar days an event occupies; a backwards event counts on its start day."""

    first = event.start.date()
    last = event.end.date()
    if last < first:
        return {first}
    # An event ending exactly at midnight does not occupy the next day.
    if last > first and event.end.time() == datetime.min.time():
        last = last - timedelta(days=1)
    return set(_date_range(first, last))


def day_categories(events: Iterable[Event], start: date, end: date) -> Dict[date, str]:
    """Category of the earliest event on each day in ``start``..``end``."""

    marks: Dict[date, str] = {}
    for event in sorted(events, key=lambda item: item.start):
        for day in days_of(event):
            if start <= day <= end:
                marks.setdefault(day, event.category)
    return marks


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class IdSequence:
    """Time-based identifiers that only ever move forward."""

    clock: Callable[[], int] = _wall_clock_ms
    last: int = 0

    def next(self) -> str:
        current = max(self.clock(), self.last + 1)
        self.last = current
        return str(current)


@dataclass
class EventStore:
    """In-memory collection of scheduled events keyed by id."""

    ids: IdSequence = field(default_factory=IdSequence)
    revision: int = 0
    _events: Dict[str, Event] = field(default_factory=dict, repr=False)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._events

    def __iter__(self) -> Iterator[Event]:
        return iter(tuple(self._events.values()))

    def events(self) -> tuple[Event, ...]:
        return tuple(self._events.values())

    def get(self, event_id: str) -> Optional[Event]:
        return self._events.get(event_id)

    def _commit(self, events: Dict[str, Event]) -> None:
        self._events = events
        self.revision += 1

    def create(self, draft: Event) -> Event:
        event = draft.replace(id=self.ids.next())
        self._commit({**self._events, event.id: event})
        logger.debug("Created event %s (%s, %.2fh)", event.id, event.category, event.hours)
        return event

    def update(self, event_id: str, draft: Event) -> Optional[Event]:
        if event_id not in self._events:
            logger.warning("Ignoring update for unknown event %s", event_id)
            return None
        event = draft.replace(id=event_id)
        self._commit({key: (event if key == event_id else value) for key, value in self._events.items()})
        logger.debug("Updated event %s", event_id)
        return event

    def delete(self, event_id: str) -> bool:
        if event_id not in self._events:
            logger.debug("Ignoring delete for unknown event %s", event_id)
            return False
        self._commit({key: value for key, value in self._events.items() if key != event_id})
        logger.debug("Deleted event %s", event_id)
        return True

    def clear(self) -> None:
        self._commit({})

    def events_for_day(self, target_day: date) -> List[Event]:
        matches = [event for event in self._events.values() if target_day in days_of(event)]
        return sorted(matches, key=lambda item: item.start)

    def events_between(self, start: date, end: date) -> List[Event]:
        collected: list[Event] = []
        for day in _date_range(start, end):
            collected.extend(self.events_for_day(day))
        # remove duplicates while preserving order
        seen: set[str] = set()
        deduped: list[Event] = []
        for event in collected:
            if event.id in seen:
                continue
            seen.add(event.id)
            deduped.append(event)
        return deduped
