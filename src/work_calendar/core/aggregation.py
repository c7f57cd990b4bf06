from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..domain import CATEGORIES, Category, Event


@dataclass(frozen=True, slots=True)
class CategorySlice:
    label: str
    value: float
    color: str
    category: str


def summarize(events: Iterable[Event], categories: Sequence[Category] = CATEGORIES) -> list[CategorySlice]:
    """Total hours per category, in catalog order.

    Events whose category is not in ``categories`` fall into no bucket. Zero and
    negative totals are reported as-is.
    """

    totals = {category.name: 0.0 for category in categories}
    for event in events:
        if event.category in totals:
            totals[event.category] += event.hours
    return [
        CategorySlice(label=category.label, value=totals[category.name], color=category.color, category=category.name)
        for category in categories
    ]


def total_hours(events: Iterable[Event]) -> float:
    return sum(event.hours for event in events)


def chart_slices(slices: Iterable[CategorySlice]) -> list[CategorySlice]:
    return [item for item in slices if item.value > 0]
