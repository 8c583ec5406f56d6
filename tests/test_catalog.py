import pytest

from burger_palace.catalog import CATEGORIES, select_category, visible_items
from burger_palace.data import ALL_ITEMS
from burger_palace.models import CategoryFilter


def _is_ordered_subsequence(subset, full):
    it = iter(full)
    return all(any(candidate == item for candidate in it) for item in subset)


def test_category_ids_include_all_first():
    assert [category_id for category_id, _ in CATEGORIES] == ["all", "burgers", "chicken", "sides", "drinks"]
    assert CATEGORIES[0][1] == "All Items"


def test_all_returns_full_catalog_in_order():
    assert visible_items(ALL_ITEMS, "all") == list(ALL_ITEMS)


@pytest.mark.parametrize("category", ["burgers", "chicken", "sides", "drinks"])
def test_filtered_items_are_ordered_subsequence(category):
    items = visible_items(ALL_ITEMS, category)
    assert items
    assert all(item.category == category for item in items)
    assert _is_ordered_subsequence(items, ALL_ITEMS)


def test_chicken_filter_has_single_sandwich():
    assert [item.name for item in visible_items(ALL_ITEMS, "chicken")] == ["Crispy Chicken Sandwich"]


def test_drinks_filter_ids():
    assert [item.id for item in visible_items(ALL_ITEMS, "drinks")] == [21, 22, 23]


def test_select_category_returns_filter():
    assert select_category("sides") == CategoryFilter(category="sides")
    assert CategoryFilter().category == "all"


def test_select_unknown_category_is_rejected():
    with pytest.raises(ValueError):
        select_category("desserts")


def test_visible_items_does_not_touch_catalog():
    catalog = list(ALL_ITEMS)
    visible_items(catalog, "burgers")
    assert catalog == list(ALL_ITEMS)
