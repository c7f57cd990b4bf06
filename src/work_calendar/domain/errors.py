from __future__ import annotations


class WorkCalendarError(Exception):
    """Base class for errors raised by the work calendar."""


class DateTimeFormatError(WorkCalendarError, ValueError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Expected a YYYY-MM-DDTHH:mm timestamp, got {text!r}")
        self.text = text


class EventValidationError(WorkCalendarError, ValueError):
    pass


class EditorStateError(WorkCalendarError, RuntimeError):
    pass
