import random
from datetime import datetime, timedelta

import pytest

from work_calendar.domain import (
    CATEGORIES,
    QUOTES,
    DateTimeFormatError,
    Event,
    category_names,
    default_category,
    find_category,
    format_timestamp,
    parse_timestamp,
    pick_quote,
)


def test_catalog_has_six_categories_in_fixed_order():
    assert category_names() == ["會議", "溝通", "產品設計", "研究", "案場排查", "其他"]
    assert len({category.name for category in CATEGORIES}) == 6
    assert default_category().name == "會議"


def test_category_label_joins_icon_and_name():
    assert find_category("研究").label == "🔬 研究"
    assert find_category("其他").color == "#ff8042"
    assert find_category("不存在") is None


def test_timestamp_text_round_trips_to_the_minute():
    value = datetime(2025, 3, 3, 9, 5, 42)
    assert format_timestamp(value) == "2025-03-03T09:05"
    assert parse_timestamp(" 2025-03-03T09:05 ") == datetime(2025, 3, 3, 9, 5)


@pytest.mark.parametrize("text", ["", "2025-03-03", "2025-03-03 09:05", "2025-13-01T09:00", "tomorrow"])
def test_parse_timestamp_rejects_malformed_text(text):
    with pytest.raises(DateTimeFormatError):
        parse_timestamp(text)


def test_event_hours_and_negative_duration():
    start = datetime(2025, 3, 3, 9, 0)
    event = Event(id="1", title="Standup", category="會議", start=start, end=start + timedelta(minutes=90))
    assert event.hours == 1.5
    backwards = event.replace(end=start - timedelta(hours=1))
    assert backwards.hours == -1.0
    assert event.hours == 1.5


def test_pick_quote_comes_from_fixed_list():
    assert pick_quote(random.Random(7)) in QUOTES
    assert pick_quote() in QUOTES
