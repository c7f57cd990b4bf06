from datetime import timedelta

import pytest
from conftest import T0, make_event

from work_calendar.core import EditorSession, EditorState, summarize
from work_calendar.domain import DateTimeFormatError, EditorStateError, EventValidationError


def test_slot_selection_opens_blank_draft():
    session = EditorSession()
    assert session.state is EditorState.CLOSED
    assert not session.dialog_open

    draft = session.open_for_slot(T0, T0 + timedelta(hours=1))
    assert session.state is EditorState.CREATING_NEW
    assert session.dialog_open
    assert not session.can_delete
    assert draft.title == ""
    assert draft.category == "會議"
    assert (draft.start, draft.end) == (T0, T0 + timedelta(hours=1))
    assert session.target_id is None


def test_save_from_slot_creates_event_and_closes(store):
    session = EditorSession()
    session.open_for_slot(T0, T0 + timedelta(hours=1))
    session.set_title("Standup")
    saved = session.save(store)
    assert len(store) == 1
    assert store.get(saved.id).title == "Standup"
    assert session.state is EditorState.CLOSED


def test_editing_works_on_a_copy(store):
    stored = store.create(make_event("研究", 1, title="paper"))
    session = EditorSession()
    session.open_for_event(stored)
    session.set_title("draft only")
    assert store.get(stored.id).title == "paper"
    session.dismiss()
    assert store.get(stored.id).title == "paper"
    assert session.state is EditorState.CLOSED


def test_changing_category_moves_hours_between_buckets(store):
    store.create(make_event("會議", 2))
    research = store.create(make_event("研究", 1))
    session = EditorSession()
    session.open_for_event(research)
    assert session.can_delete
    session.set_category("溝通")
    session.save(store)

    totals = {item.category: item.value for item in summarize(store.events())}
    assert totals["研究"] == 0.0
    assert totals["溝通"] == 1.0
    assert len(store) == 2
    assert store.get(research.id).category == "溝通"


def test_delete_only_from_existing(store):
    session = EditorSession()
    session.open_for_slot(T0, T0 + timedelta(hours=1))
    with pytest.raises(EditorStateError):
        session.delete(store)

    stored = store.create(make_event("其他", 1))
    session.open_for_event(stored)
    assert session.delete(store) is True
    assert len(store) == 0
    assert session.state is EditorState.CLOSED


def test_save_while_closed_is_rejected(store):
    with pytest.raises(EditorStateError):
        EditorSession().save(store)


def test_end_before_start_is_rejected_and_session_stays_open(store):
    session = EditorSession()
    session.open_for_slot(T0, T0 + timedelta(hours=1))
    session.set_end(T0 - timedelta(hours=1))
    with pytest.raises(EventValidationError):
        session.save(store)
    assert session.state is EditorState.CREATING_NEW
    assert len(store) == 0


def test_text_inputs_echo_and_reparse():
    session = EditorSession()
    session.open_for_slot(T0, T0 + timedelta(hours=1))
    assert session.start_text == "2025-03-03T09:00"
    session.set_end_text("2025-03-03T11:30")
    assert session.draft.end == T0 + timedelta(hours=2, minutes=30)


def test_malformed_text_leaves_draft_untouched():
    session = EditorSession()
    session.open_for_slot(T0, T0 + timedelta(hours=1))
    with pytest.raises(DateTimeFormatError):
        session.set_start_text("2025-03-03 25:00")
    assert session.draft.start == T0


def test_saving_a_vanished_target_is_a_noop(store):
    stored = store.create(make_event("會議", 1))
    session = EditorSession()
    session.open_for_event(stored)
    store.delete(stored.id)
    assert session.save(store) is None
    assert len(store) == 0
    assert session.state is EditorState.CLOSED


def test_new_gesture_replaces_previous_session(store):
    stored = store.create(make_event("會議", 1))
    session = EditorSession()
    session.open_for_event(stored)
    session.open_for_slot(T0, T0 + timedelta(hours=3))
    assert session.state is EditorState.CREATING_NEW
    assert session.target_id is None
