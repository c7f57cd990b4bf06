from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain import CATEGORIES, Category, default_category, find_category
from .context import ServiceContext


@dataclass(slots=True)
class CategoryService:
    context: ServiceContext

    def list_categories(self) -> list[Category]:
        return list(CATEGORIES)

    def default(self) -> Category:
        return default_category()

    def fetch(self, name: str) -> Optional[Category]:
        return find_category(name)

    def color_for(self, name: str, fallback: str = "#9ca3af") -> str:
        category = find_category(name)
        return category.color if category else fallback
