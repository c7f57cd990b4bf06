from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_CHART_FONTS = (
    "Noto Sans CJK TC",
    "Microsoft JhengHei",
    "PingFang TC",
    "Heiti TC",
    "Segoe UI Emoji",
    "DejaVu Sans",
)


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    organization: str
    week_start: str

    @property
    def starts_on_monday(self) -> bool:
        return self.week_start.lower() == "monday"


@dataclass(frozen=True)
class ScheduleSettings:
    day_start_hour: int
    day_end_hour: int

    @property
    def hours(self) -> range:
        return range(self.day_start_hour, self.day_end_hour)


@dataclass(frozen=True)
class ChartSettings:
    font_families: tuple[str, ...]


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Optional[str]


@dataclass(frozen=True)
class AppSettings:
    ui: UiSettings
    schedule: ScheduleSettings
    chart: ChartSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int, *, low: int, high: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if not low <= value <= high:
        return default
    return value


def _fonts_from_env(name: str) -> tuple[str, ...]:
    raw = os.getenv(name)
    if not raw:
        return _DEFAULT_CHART_FONTS
    families = tuple(part.strip() for part in raw.split(",") if part.strip())
    return families or _DEFAULT_CHART_FONTS


def load_settings() -> AppSettings:
    ui = UiSettings(
        app_name=os.getenv("WORK_CALENDAR_APP_NAME", "chia's 工作行事曆"),
        organization=os.getenv("WORK_CALENDAR_APP_ORG", "WorkCalendar"),
        week_start=os.getenv("WORK_CALENDAR_WEEK_START", "Sunday"),
    )

    day_start = _int_from_env("WORK_CALENDAR_DAY_START_HOUR", 0, low=0, high=23)
    day_end = _int_from_env("WORK_CALENDAR_DAY_END_HOUR", 24, low=1, high=24)
    if day_end <= day_start:
        day_start, day_end = 0, 24
    schedule = ScheduleSettings(day_start_hour=day_start, day_end_hour=day_end)

    chart = ChartSettings(font_families=_fonts_from_env("WORK_CALENDAR_CHART_FONTS"))

    logging_settings = LoggingSettings(
        level=os.getenv("WORK_CALENDAR_LOG_LEVEL", "INFO").upper(),
        directory=os.getenv("WORK_CALENDAR_LOG_DIR"),
    )

    return AppSettings(ui=ui, schedule=schedule, chart=chart, logging=logging_settings)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return load_settings()
