from datetime import date, datetime, timedelta

from conftest import T0, make_event

from work_calendar.data import EventStore, IdSequence, day_categories, days_of


def test_create_appends_with_fresh_id(store):
    first = store.create(make_event("會議", 1))
    second = store.create(make_event("會議", 1))
    assert len(store) == 2
    assert first.id != second.id
    assert store.get(first.id) == first


def test_ids_stay_monotonic_when_clock_stalls_or_rewinds(clock):
    ids = IdSequence(clock=clock)
    a = int(ids.next())
    b = int(ids.next())
    clock.value -= 5000
    c = int(ids.next())
    assert a < b < c


def test_ids_are_never_reused_after_delete_or_clear(store):
    created = store.create(make_event("研究", 1))
    store.delete(created.id)
    store.clear()
    again = store.create(make_event("研究", 1))
    assert again.id != created.id


def test_update_replaces_fields_and_keeps_id(store):
    original = store.create(make_event("研究", 1, title="paper"))
    draft = original.replace(id="ignored", category="溝通", title="sync")
    updated = store.update(original.id, draft)
    assert updated.id == original.id
    assert len(store) == 1
    assert store.get(original.id).category == "溝通"
    assert store.get(original.id).title == "sync"


def test_update_and_delete_unknown_id_leave_store_unchanged(store):
    store.create(make_event("會議", 2))
    before = store.events()
    revision = store.revision
    assert store.update("missing", make_event("其他", 3)) is None
    assert store.delete("missing") is False
    assert store.events() == before
    assert store.revision == revision


def test_delete_removes_exactly_one(store):
    a = store.create(make_event("會議", 2))
    b = store.create(make_event("研究", 1))
    assert store.delete(a.id) is True
    assert len(store) == 1
    assert a.id not in store
    assert b.id in store


def test_mutations_replace_the_collection(store):
    created = store.create(make_event("會議", 1))
    snapshot = store.events()
    store.update(created.id, created.replace(title="changed"))
    assert snapshot[0].title == ""
    assert store.revision == 2


def test_events_for_day_sorted_and_spanning(store):
    late = store.create(make_event("會議", 1, start=T0 + timedelta(hours=5)))
    early = store.create(make_event("研究", 1, start=T0))
    overnight = store.create(make_event("其他", 20, start=T0 + timedelta(hours=10)))
    assert [event.id for event in store.events_for_day(T0.date())] == [early.id, late.id, overnight.id]
    assert [event.id for event in store.events_for_day(T0.date() + timedelta(days=1))] == [overnight.id]


def test_event_ending_at_midnight_stays_on_its_day(store):
    start = datetime(2025, 3, 3, 22, 0)
    store.create(make_event("會議", 2, start=start))
    assert len(store.events_for_day(date(2025, 3, 3))) == 1
    assert store.events_for_day(date(2025, 3, 4)) == []


def test_negative_duration_event_is_indexed_on_start_day(store):
    store.create(make_event("會議", -30, start=T0))
    assert len(store.events_for_day(T0.date())) == 1


def test_events_between_deduplicates(store):
    multi_day = store.create(make_event("案場排查", 48, start=T0))
    found = store.events_between(T0.date(), T0.date() + timedelta(days=2))
    assert [event.id for event in found] == [multi_day.id]


def test_default_store_uses_wall_clock_ids():
    store = EventStore()
    created = store.create(make_event("會議", 1))
    assert created.id.isdigit()


def test_days_of_covers_every_occupied_day():
    event = make_event("會議", 0, start=datetime(2025, 2, 27, 9, 0)).replace(end=datetime(2025, 3, 2, 17, 0))
    assert days_of(event) == {date(2025, 2, 27), date(2025, 2, 28), date(2025, 3, 1), date(2025, 3, 2)}
    assert days_of(make_event("會議", -3, start=T0)) == {T0.date()}


def test_month_marks_include_days_after_an_earlier_start(store):
    store.create(make_event("研究", 0, start=datetime(2025, 2, 27, 9, 0)).replace(end=datetime(2025, 3, 2, 17, 0)))
    store.create(make_event("會議", 1, start=datetime(2025, 3, 2, 8, 0)))
    march = store.events_between(date(2025, 3, 1), date(2025, 3, 31))
    marks = day_categories(march, date(2025, 3, 1), date(2025, 3, 31))
    assert marks == {date(2025, 3, 1): "研究", date(2025, 3, 2): "研究"}
