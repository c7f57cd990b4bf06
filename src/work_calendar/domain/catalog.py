from __future__ import annotations

from typing import Optional

from .models import Category

CATEGORIES: tuple[Category, ...] = (
    Category(name="會議", icon="📅", color="#8884d8"),
    Category(name="溝通", icon="💬", color="#82ca9d"),
    Category(name="產品設計", icon="🎨", color="#ffc658"),
    Category(name="研究", icon="🔬", color="#d0ed57"),
    Category(name="案場排查", icon="🔍", color="#a4de6c"),
    Category(name="其他", icon="📌", color="#ff8042"),
)


def default_category() -> Category:
    return CATEGORIES[0]


def category_names() -> list[str]:
    return [category.name for category in CATEGORIES]


def find_category(name: str) -> Optional[Category]:
    for category in CATEGORIES:
        if category.name == name:
            return category
    return None
