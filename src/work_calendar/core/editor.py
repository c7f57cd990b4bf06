from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from ..data import EventStore
from ..domain import (
    EditorStateError,
    Event,
    EventValidationError,
    default_category,
    format_timestamp,
    parse_timestamp,
)

logger = logging.getLogger(__name__)


class EditorState(str, Enum):
    CLOSED = "closed"
    CREATING_NEW = "creating_new"
    EDITING_EXISTING = "editing_existing"


def _blank_draft() -> Event:
    now = datetime.now().replace(second=0, microsecond=0)
    return Event(id="", title="", category=default_category().name, start=now, end=now)


@dataclass
class EditorSession:
    """What the user is currently editing.

    The draft is always a copy; the session remembers the id of the event under
    edit rather than the event itself, so commits go through the store by id.
    """

    state: EditorState = EditorState.CLOSED
    draft: Event = field(default_factory=_blank_draft)
    target_id: Optional[str] = None

    @property
    def dialog_open(self) -> bool:
        return self.state is not EditorState.CLOSED

    @property
    def can_delete(self) -> bool:
        return self.state is EditorState.EDITING_EXISTING

    # ------------------------------------------------------------------ gestures

    def open_for_slot(self, start: datetime, end: datetime) -> Event:
        self.draft = Event(id="", title="", category=default_category().name, start=start, end=end)
        self.target_id = None
        self.state = EditorState.CREATING_NEW
        return self.draft

    def open_for_event(self, event: Event) -> Event:
        self.draft = event.replace()
        self.target_id = event.id
        self.state = EditorState.EDITING_EXISTING
        return self.draft

    # ------------------------------------------------------------------ field edits

    def set_title(self, title: str) -> None:
        self.draft.title = title

    def set_category(self, name: str) -> None:
        self.draft.category = name

    def set_start(self, value: datetime) -> None:
        self.draft.start = value

    def set_end(self, value: datetime) -> None:
        self.draft.end = value

    def set_start_text(self, text: str) -> None:
        self.draft.start = parse_timestamp(text)

    def set_end_text(self, text: str) -> None:
        self.draft.end = parse_timestamp(text)

    @property
    def start_text(self) -> str:
        return format_timestamp(self.draft.start)

    @property
    def end_text(self) -> str:
        return format_timestamp(self.draft.end)

    # ------------------------------------------------------------------ commits

    def save(self, store: EventStore) -> Optional[Event]:
        if not self.dialog_open:
            raise EditorStateError("Nothing to save: the editor is closed.")
        if self.draft.end < self.draft.start:
            raise EventValidationError("結束時間不可早於開始時間。")

        if self.state is EditorState.EDITING_EXISTING:
            assert self.target_id is not None
            saved = store.update(self.target_id, self.draft)
            if saved is None:
                logger.warning("Event %s disappeared while being edited; changes dropped", self.target_id)
        else:
            saved = store.create(self.draft)
        self._close()
        return saved

    def delete(self, store: EventStore) -> bool:
        if self.state is not EditorState.EDITING_EXISTING:
            raise EditorStateError("Only an existing event can be deleted.")
        assert self.target_id is not None
        deleted = store.delete(self.target_id)
        self._close()
        return deleted

    def dismiss(self) -> None:
        if self.dialog_open:
            logger.debug("Editor dismissed; draft discarded")
        self._close()

    def _close(self) -> None:
        self.state = EditorState.CLOSED
        self.target_id = None
        self.draft = _blank_draft()
