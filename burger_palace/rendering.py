"""Rendering helpers for menu cards, cart summary and testimonials."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from burger_palace.cart import total_item_count, total_price
from burger_palace.data import DAYS_OF_WEEK, hours_for
from burger_palace.models import Cart, MenuItem, Testimonial

ACCENT = "#ea580c"


def format_price(price: Decimal) -> str:
    """Display price with two decimals, e.g. ``$5.00``."""
    return f"${price:.2f}"


def render_stars(rating: int) -> str:
    """Five-slot star string, e.g. ``★★★★☆`` for 4."""
    return "★" * rating + "☆" * (5 - rating)


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    if category == "burgers":
        return "bold #ffffff on #b23a48"
    if category == "chicken":
        return "bold #1f1300 on #f2b134"
    if category == "sides":
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_menu_card(item: MenuItem) -> Text:
    """Render the body of a menu card: title, price, tags and description."""
    text = Text()
    text.append(item.name, style="bold")
    text.append("  ")
    text.append(format_price(item.price), style=f"bold {ACCENT}")
    text.append("\n")
    text.append(f" {item.category} ", style=badge_style(item.category))
    if item.popular:
        text.append(" ")
        text.append(" Popular ", style=f"bold #ffffff on {ACCENT}")
    text.append("\n")
    text.append(item.description, style="dim")
    if item.image:
        text.append("\n")
        text.append("View photo", style=f"underline link {item.image}")
    return text


def format_cart_summary(cart: Cart) -> str:
    """One-line cart banner: item count and total."""
    return f"Cart: {total_item_count(cart)} items - ${total_price(cart)}"


def format_hours() -> Text:
    """Weekly opening hours, one day per line."""
    text = Text()
    for idx, day in enumerate(DAYS_OF_WEEK):
        if idx > 0:
            text.append("\n")
        text.append(f"{day}:".ljust(11), style="bold")
        text.append(hours_for(day))
    return text


def format_testimonial(testimonial: Testimonial) -> Text:
    text = Text()
    text.append(testimonial.name, style="bold")
    text.append("  ")
    text.append(render_stars(testimonial.rating), style="#facc15")
    text.append("\n")
    text.append(f'"{testimonial.comment}"', style="italic")
    text.append("\n")
    text.append(testimonial.date, style="dim")
    return text
