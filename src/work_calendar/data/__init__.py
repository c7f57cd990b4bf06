"""In-memory data layer."""

from __future__ import annotations

from .event_store import EventStore, IdSequence, day_categories, days_of

__all__ = ["EventStore", "IdSequence", "day_categories", "days_of"]
