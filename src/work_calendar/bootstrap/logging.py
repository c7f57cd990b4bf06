from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from platformdirs import user_log_dir

from ..config import get_settings

APP_SLUG = "work-calendar"

_INITIALIZED = False


def resolve_log_dir(directory: Optional[str] = None) -> Path:
    configured = directory or get_settings().logging.directory
    if configured:
        return Path(configured)
    return Path(user_log_dir(APP_SLUG, appauthor=False))


def configure_logging(*, level: Optional[str] = None, log_dir: Optional[Path] = None) -> Path:
    """Configure application-wide logging with console and dated file output."""

    global _INITIALIZED
    target_dir = log_dir or resolve_log_dir()
    log_path = target_dir / f"{APP_SLUG}-{datetime.now().strftime('%Y%m%d')}.log"
    if _INITIALIZED:
        return log_path

    resolved_level = getattr(logging, (level or get_settings().logging.level).upper(), logging.INFO)
    target_dir.mkdir(parents=True, exist_ok=True)

    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        logging.FileHandler(log_path, encoding="utf-8"),
    ]

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_path)
    return log_path
