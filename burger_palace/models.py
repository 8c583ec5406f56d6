"""Domain models for the Burger Palace site."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

MENU_CATEGORIES = ("burgers", "chicken", "sides", "drinks")


@dataclass(frozen=True)
class MenuItem:
    """A purchasable catalog item."""

    id: int
    name: str
    description: str
    price: Decimal
    category: str
    popular: bool = False
    image: str | None = None


@dataclass(frozen=True)
class CartLine:
    """One distinct item and the quantity selected this session."""

    item: MenuItem
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.item.price * self.quantity


@dataclass(frozen=True)
class Cart:
    """Ordered cart lines, at most one per item id."""

    lines: tuple[CartLine, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class CategoryFilter:
    """Currently selected menu category."""

    category: str = "all"


@dataclass(frozen=True)
class Testimonial:
    """A customer review shown in the about section."""

    id: int
    name: str
    rating: int
    comment: str
    date: str


@dataclass(frozen=True)
class RestaurantInfo:
    """Restaurant metadata shown in the hero, contact section and footer."""

    name: str
    tagline: str
    description: str
    address: str
    city: str
    phone: str
    email: str
    hours: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Notification:
    """A fire-and-forget toast request."""

    title: str
    description: str
    variant: str = "default"
    duration: float | None = None


@dataclass(frozen=True)
class ContactForm:
    """Current values of the contact form fields."""

    name: str = ""
    email: str = ""
    message: str = ""
