"""Cart accumulation and totals.

Every function returns a new ``Cart``; the owning view swaps its reference
after each call.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from burger_palace.models import Cart, CartLine, MenuItem

_CENTS = Decimal("0.01")


def add_item(cart: Cart, item: MenuItem) -> Cart:
    """Add one unit of ``item``, merging with an existing line for the same id."""
    for idx, line in enumerate(cart.lines):
        if line.item.id == item.id:
            merged = CartLine(item=line.item, quantity=line.quantity + 1)
            return Cart(lines=cart.lines[:idx] + (merged,) + cart.lines[idx + 1 :])
    return Cart(lines=cart.lines + (CartLine(item=item, quantity=1),))


def total_item_count(cart: Cart) -> int:
    """Number of units across all lines, 0 for an empty cart."""
    return sum(line.quantity for line in cart.lines)


def total_price(cart: Cart) -> str:
    """Cart total rounded half-up to cents, e.g. ``"25.98"``."""
    total = sum((line.line_total for line in cart.lines), Decimal("0"))
    return str(total.quantize(_CENTS, rounding=ROUND_HALF_UP))


def clear(cart: Cart) -> Cart:
    """Empty the cart after an order is placed."""
    return Cart()
