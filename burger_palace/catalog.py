"""Menu category filter."""

from __future__ import annotations

from typing import Iterable

from burger_palace.constant import CATEGORY_LABELS
from burger_palace.models import CategoryFilter, MenuItem

ALL_CATEGORY = "all"

CATEGORIES: tuple[tuple[str, str], ...] = tuple(CATEGORY_LABELS.items())


def select_category(category: str) -> CategoryFilter:
    """Return the filter for a category id; unknown ids are a caller error."""
    if category not in CATEGORY_LABELS:
        raise ValueError(f"Unknown menu category {category!r}")
    return CategoryFilter(category=category)


def visible_items(catalog: Iterable[MenuItem], category: str) -> list[MenuItem]:
    """Items shown for a category, in catalog order."""
    if category == ALL_CATEGORY:
        return list(catalog)
    return [item for item in catalog if item.category == category]
