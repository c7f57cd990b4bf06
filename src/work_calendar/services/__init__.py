"""Application services orchestrating the store and domain logic."""

from __future__ import annotations

from .calendar import CalendarService
from .categories import CategoryService
from .context import ServiceContext
from .state import AppState

__all__ = ["AppState", "CalendarService", "CategoryService", "ServiceContext"]
