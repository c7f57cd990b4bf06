from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import EventStore


@dataclass(slots=True)
class ServiceContext:
    """Shared settings and the single in-memory event store."""

    settings: AppSettings = field(default_factory=get_settings)
    store: EventStore = field(default_factory=EventStore)
