from decimal import Decimal

from burger_palace.cart import add_item
from burger_palace.data import MENU_ITEMS, TESTIMONIALS
from burger_palace.models import Cart
from burger_palace.rendering import (
    format_cart_summary,
    format_hours,
    format_menu_card,
    format_price,
    format_testimonial,
    render_stars,
)


def test_stars():
    assert render_stars(5) == "★★★★★"
    assert render_stars(3) == "★★★☆☆"


def test_price_always_has_cents():
    assert format_price(Decimal("5")) == "$5.00"
    assert format_price(Decimal("12.99")) == "$12.99"


def test_menu_card_shows_popular_badge():
    card = format_menu_card(MENU_ITEMS[0]).plain
    assert "Classic Cheeseburger" in card
    assert "$12.99" in card
    assert "Popular" in card


def test_menu_card_without_popular_flag():
    assert "Popular" not in format_menu_card(MENU_ITEMS[2]).plain


def test_cart_summary(burger):
    cart = add_item(add_item(Cart(), burger), burger)
    assert format_cart_summary(cart) == "Cart: 2 items - $25.98"


def test_hours_lists_every_day():
    hours = format_hours().plain
    assert hours.count("\n") == 6
    assert "Monday:" in hours
    assert "Sunday:" in hours


def test_testimonial_card():
    text = format_testimonial(TESTIMONIALS[0]).plain
    assert "Sarah Johnson" in text
    assert "★★★★★" in text
    assert "2 days ago" in text
