from decimal import Decimal

from burger_palace.cart import add_item, clear, total_item_count, total_price
from burger_palace.data import ALL_ITEMS
from burger_palace.models import Cart, CartLine


def test_empty_cart_totals():
    cart = Cart()
    assert total_item_count(cart) == 0
    assert total_price(cart) == "0.00"


def test_first_add_creates_single_line(burger):
    cart = add_item(Cart(), burger)
    assert total_item_count(cart) == 1
    assert total_price(cart) == "12.99"
    assert cart.lines == (CartLine(item=burger, quantity=1),)


def test_adding_same_item_twice_merges_quantity(burger):
    cart = add_item(add_item(Cart(), burger), burger)
    assert len(cart.lines) == 1
    assert cart.lines[0].item.id == 1
    assert cart.lines[0].quantity == 2
    assert total_price(cart) == "25.98"


def test_two_distinct_items_then_clear(burger, fries):
    cart = add_item(add_item(Cart(), burger), fries)
    assert total_item_count(cart) == 2
    assert total_price(cart) == "17.98"

    emptied = clear(cart)
    assert total_item_count(emptied) == 0
    assert total_price(emptied) == "0.00"


def test_add_does_not_mutate_input_cart(burger, fries):
    original = add_item(Cart(), burger)
    snapshot = original.lines
    add_item(original, burger)
    add_item(original, fries)
    assert original.lines == snapshot
    assert original.lines[0].quantity == 1


def test_merge_keeps_line_order(burger, fries, make_item):
    drink = make_item(21, "2.99", "drinks")
    cart = Cart()
    for item in (burger, fries, drink, fries):
        cart = add_item(cart, item)
    assert [line.item.id for line in cart.lines] == [1, 11, 21]
    assert [line.quantity for line in cart.lines] == [1, 2, 1]


def test_each_add_increments_count_by_one():
    cart = Cart()
    for expected, item in enumerate(ALL_ITEMS + ALL_ITEMS[:3], start=1):
        cart = add_item(cart, item)
        assert total_item_count(cart) == expected


def test_total_rounds_half_up(make_item):
    half_cent = make_item(99, "0.005")
    assert total_price(add_item(Cart(), half_cent)) == "0.01"


def test_total_is_exact_for_many_units(make_item):
    soda = make_item(21, "2.99", "drinks")
    cart = Cart()
    for _ in range(10):
        cart = add_item(cart, soda)
    assert cart.lines[0].line_total == Decimal("29.90")
    assert total_price(cart) == "29.90"


def test_clear_any_cart_prices_zero(burger):
    assert total_price(clear(Cart())) == "0.00"
    assert total_price(clear(add_item(Cart(), burger))) == "0.00"
