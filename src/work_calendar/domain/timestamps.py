from __future__ import annotations

from datetime import datetime

from .errors import DateTimeFormatError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"


def format_timestamp(value: datetime) -> str:
    """Render ``value`` the way the editor's date-time inputs echo it."""

    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """Parse ``YYYY-MM-DDTHH:mm`` text, rejecting anything else."""

    cleaned = (text or "").strip()
    try:
        return datetime.strptime(cleaned, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise DateTimeFormatError(text) from exc
