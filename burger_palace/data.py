"""Static site data built from the editable constants."""

from __future__ import annotations

from decimal import Decimal

from burger_palace.constant import (
    DRINKS as _DRINKS_RAW,
    MENU_ITEMS as _MENU_ITEMS_RAW,
    RESTAURANT_INFO as _RESTAURANT_INFO_RAW,
    SIDES as _SIDES_RAW,
    TESTIMONIALS as _TESTIMONIALS_RAW,
)
from burger_palace.models import MENU_CATEGORIES, MenuItem, RestaurantInfo, Testimonial

DAYS_OF_WEEK = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def build_menu_item(raw: dict[str, object]) -> MenuItem:
    """Convert one raw catalog entry into a MenuItem, validating price and category."""
    price = Decimal(str(raw["price"]))
    if price < 0:
        raise ValueError(f"Menu item {raw['id']} has a negative price: {price}")

    category = str(raw["category"])
    if category not in MENU_CATEGORIES:
        raise ValueError(f"Menu item {raw['id']} has unknown category {category!r}")

    image = raw.get("image")
    return MenuItem(
        id=int(raw["id"]),  # type: ignore[arg-type]
        name=str(raw["name"]),
        description=str(raw["description"]),
        price=price,
        category=category,
        popular=bool(raw.get("popular", False)),
        image=str(image) if image is not None else None,
    )


def build_testimonial(raw: dict[str, object]) -> Testimonial:
    """Convert one raw testimonial, validating the 1-5 rating."""
    rating = int(raw["rating"])  # type: ignore[arg-type]
    if not (1 <= rating <= 5):
        raise ValueError(f"Testimonial {raw['id']} rating must be between 1 and 5")
    return Testimonial(
        id=int(raw["id"]),  # type: ignore[arg-type]
        name=str(raw["name"]),
        rating=rating,
        comment=str(raw["comment"]),
        date=str(raw["date"]),
    )


def ensure_unique_ids(items: tuple[MenuItem, ...]) -> tuple[MenuItem, ...]:
    """Reject catalogs where two items share an id."""
    seen: set[int] = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"Duplicate menu item id {item.id}")
        seen.add(item.id)
    return items


def hours_for(day: str) -> str:
    """Get opening hours text for a weekday name (case-insensitive)."""
    return RESTAURANT_INFO.hours[day.strip().lower()]


RESTAURANT_INFO = RestaurantInfo(
    name=str(_RESTAURANT_INFO_RAW["name"]),
    tagline=str(_RESTAURANT_INFO_RAW["tagline"]),
    description=str(_RESTAURANT_INFO_RAW["description"]),
    address=str(_RESTAURANT_INFO_RAW["address"]),
    city=str(_RESTAURANT_INFO_RAW["city"]),
    phone=str(_RESTAURANT_INFO_RAW["phone"]),
    email=str(_RESTAURANT_INFO_RAW["email"]),
    hours=dict(_RESTAURANT_INFO_RAW["hours"]),  # type: ignore[arg-type]
)

MENU_ITEMS: tuple[MenuItem, ...] = tuple(build_menu_item(raw) for raw in _MENU_ITEMS_RAW)
SIDES: tuple[MenuItem, ...] = tuple(build_menu_item(raw) for raw in _SIDES_RAW)
DRINKS: tuple[MenuItem, ...] = tuple(build_menu_item(raw) for raw in _DRINKS_RAW)

# The full catalog is concatenated once; every view reads this same snapshot.
ALL_ITEMS: tuple[MenuItem, ...] = ensure_unique_ids(MENU_ITEMS + SIDES + DRINKS)

TESTIMONIALS: tuple[Testimonial, ...] = tuple(build_testimonial(raw) for raw in _TESTIMONIALS_RAW)
