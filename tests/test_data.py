from decimal import Decimal

import pytest

from burger_palace.data import (
    ALL_ITEMS,
    DAYS_OF_WEEK,
    DRINKS,
    MENU_ITEMS,
    RESTAURANT_INFO,
    SIDES,
    TESTIMONIALS,
    build_menu_item,
    build_testimonial,
    ensure_unique_ids,
    hours_for,
)


def test_catalog_is_menu_then_sides_then_drinks():
    assert ALL_ITEMS == MENU_ITEMS + SIDES + DRINKS
    assert len(ALL_ITEMS) == 13


def test_catalog_ids_are_unique():
    ids = [item.id for item in ALL_ITEMS]
    assert len(ids) == len(set(ids))


def test_prices_load_as_decimals():
    assert MENU_ITEMS[0].price == Decimal("12.99")
    assert all(item.price >= 0 for item in ALL_ITEMS)


def test_optional_fields_default_for_sides():
    fries = SIDES[0]
    assert fries.popular is False
    assert fries.image is None


def test_restaurant_info_and_hours():
    assert RESTAURANT_INFO.name == "Burger Palace"
    assert len(DAYS_OF_WEEK) == 7
    assert hours_for("Friday") == "11:00 AM - 11:00 PM"
    assert hours_for("sunday") == "10:00 AM - 9:00 PM"


def test_testimonial_ratings_in_range():
    assert len(TESTIMONIALS) == 3
    assert all(1 <= t.rating <= 5 for t in TESTIMONIALS)


def test_duplicate_ids_are_rejected(make_item):
    with pytest.raises(ValueError, match="Duplicate"):
        ensure_unique_ids((make_item(1, "1.00"), make_item(1, "2.00")))


def test_negative_price_is_rejected():
    raw = {"id": 99, "name": "Bad", "description": "", "price": "-1.00", "category": "sides"}
    with pytest.raises(ValueError, match="negative"):
        build_menu_item(raw)


def test_unknown_category_is_rejected():
    raw = {"id": 99, "name": "Cake", "description": "", "price": "3.00", "category": "desserts"}
    with pytest.raises(ValueError, match="category"):
        build_menu_item(raw)


def test_rating_out_of_range_is_rejected():
    raw = {"id": 9, "name": "X", "rating": 6, "comment": "", "date": "today"}
    with pytest.raises(ValueError):
        build_testimonial(raw)


def test_hours_for_unknown_day_has_no_fallback():
    with pytest.raises(KeyError):
        hours_for("Funday")
