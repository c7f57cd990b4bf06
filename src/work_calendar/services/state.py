from __future__ import annotations

from dataclasses import dataclass, field

from ..core import EditorSession
from .calendar import CalendarService
from .categories import CategoryService
from .context import ServiceContext


@dataclass(slots=True)
class AppState:
    context: ServiceContext = field(default_factory=ServiceContext)
    editor: EditorSession = field(default_factory=EditorSession)
    calendar: CalendarService = field(init=False)
    categories: CategoryService = field(init=False)

    def __post_init__(self) -> None:
        self.calendar = CalendarService(self.context)
        self.categories = CategoryService(self.context)
