from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core import CategorySlice, EditorSession, summarize, total_hours
from ..data import EventStore, day_categories
from ..domain import Event
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    @property
    def store(self) -> EventStore:
        return self.context.store

    def list_events(self) -> list[Event]:
        return list(self.store.events())

    def list_for_day(self, target_day: date) -> list[Event]:
        return self.store.events_for_day(target_day)

    def list_between(self, start: date, end: date) -> list[Event]:
        return self.store.events_between(start, end)

    def day_marks(self, start: date, end: date) -> dict[date, str]:
        return day_categories(self.list_between(start, end), start, end)

    def fetch(self, event_id: str) -> Optional[Event]:
        return self.store.get(event_id)

    def save_draft(self, session: EditorSession) -> Optional[Event]:
        editing = session.target_id
        saved = session.save(self.store)
        if saved is not None:
            action = "Updated" if editing else "Created"
            logger.info("%s event %s in %s", action, saved.id, saved.category)
        return saved

    def delete_draft(self, session: EditorSession) -> bool:
        target = session.target_id
        deleted = session.delete(self.store)
        if deleted:
            logger.info("Deleted event %s", target)
        return deleted

    def clear(self) -> None:
        count = len(self.store)
        self.store.clear()
        logger.info("Cleared %d events", count)

    def summary(self) -> list[CategorySlice]:
        return summarize(self.store.events())

    def total_hours(self) -> float:
        return total_hours(self.store.events())
