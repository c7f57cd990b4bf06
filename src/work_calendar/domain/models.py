from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace as _replace
from datetime import datetime, timedelta
from typing import Any


@dataclass(frozen=True, slots=True)
class Category:
    name: str
    icon: str
    color: str

    @property
    def label(self) -> str:
        return f"{self.icon} {self.name}"


@dataclass(slots=True)
class Event:
    id: str
    title: str
    category: str
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def hours(self) -> float:
        return self.duration.total_seconds() / 3600

    def replace(self, **changes: Any) -> "Event":
        return _replace(self, **changes)
