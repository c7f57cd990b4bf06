"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, ChartSettings, LoggingSettings, ScheduleSettings, UiSettings, get_settings, load_settings
from .theme import AppPalette

__all__ = [
    "AppPalette",
    "AppSettings",
    "ChartSettings",
    "LoggingSettings",
    "ScheduleSettings",
    "UiSettings",
    "get_settings",
    "load_settings",
]
