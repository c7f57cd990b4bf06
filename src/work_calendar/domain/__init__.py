"""Domain models for the work calendar."""

from __future__ import annotations

from .catalog import CATEGORIES, category_names, default_category, find_category
from .errors import DateTimeFormatError, EditorStateError, EventValidationError, WorkCalendarError
from .models import Category, Event
from .quotes import QUOTES, pick_quote
from .timestamps import TIMESTAMP_FORMAT, format_timestamp, parse_timestamp

__all__ = [
    "CATEGORIES",
    "Category",
    "DateTimeFormatError",
    "EditorStateError",
    "Event",
    "EventValidationError",
    "QUOTES",
    "TIMESTAMP_FORMAT",
    "WorkCalendarError",
    "category_names",
    "default_category",
    "find_category",
    "format_timestamp",
    "parse_timestamp",
    "pick_quote",
]
