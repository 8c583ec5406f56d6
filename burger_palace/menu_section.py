"""Menu section: category filter, item cards and the session cart."""

from __future__ import annotations

import logging
from typing import Sequence

from textual.app import ComposeResult
from textual.containers import Grid, Horizontal, Vertical
from textual.widgets import Button, Static

from burger_palace.cart import add_item, clear
from burger_palace.catalog import CATEGORIES, select_category, visible_items
from burger_palace.data import ALL_ITEMS
from burger_palace.models import Cart, CategoryFilter, MenuItem
from burger_palace.notifications import Notifier, added_to_cart, order_placed
from burger_palace.rendering import format_cart_summary, format_menu_card
from burger_palace.sections import Section

log = logging.getLogger(__name__)


class MenuCard(Vertical):
    """One catalog item with its "Add to Cart" button."""

    DEFAULT_CSS = """
    MenuCard {
        height: auto;
        border: round $secondary;
        padding: 0 1;
    }

    MenuCard .card-body {
        height: auto;
        margin-bottom: 1;
    }

    MenuCard Button {
        width: 100%;
    }
    """

    def __init__(self, item: MenuItem) -> None:
        super().__init__(id=f"item-{item.id}", classes="menu-card")
        self.item = item

    def compose(self) -> ComposeResult:
        yield Static(format_menu_card(self.item), classes="card-body")
        yield Button("Add to Cart", id=f"add-{self.item.id}", variant="warning")


class MenuSection(Section):
    """Owns the category filter and cart for the current session."""

    DEFAULT_CSS = """
    #category-bar {
        height: auto;
        align: center middle;
        margin-bottom: 1;
    }

    #category-bar Button {
        margin: 0 1;
    }

    #cart-summary {
        height: auto;
        background: #ea580c;
        padding: 1 2;
        margin-bottom: 1;
        align: center middle;
    }

    #cart-total {
        text-style: bold;
        color: #ffffff;
        text-align: center;
        width: 100%;
    }

    #menu-grid {
        grid-size: 3;
        grid-gutter: 1 2;
        grid-rows: auto;
        height: auto;
    }
    """

    def __init__(self, notifier: Notifier, catalog: Sequence[MenuItem] = ALL_ITEMS) -> None:
        super().__init__(id="menu")
        self.notifier = notifier
        self.catalog = tuple(catalog)
        self.items_by_id = {item.id: item for item in self.catalog}
        self.category_filter = CategoryFilter()
        self.cart = Cart()

    def compose(self) -> ComposeResult:
        yield Static("Our Menu", classes="section-title")
        yield Static(
            "Discover our carefully crafted selection of gourmet burgers, sides, and drinks",
            classes="section-subtitle",
        )
        with Horizontal(id="category-bar"):
            for category_id, label in CATEGORIES:
                yield Button(label, id=f"category-{category_id}", classes="category-button")
        with Vertical(id="cart-summary"):
            yield Static(id="cart-total")
            yield Button("Place Order", id="place-order")
        with Grid(id="menu-grid"):
            for item in self.catalog:
                yield MenuCard(item)

    def on_mount(self) -> None:
        self._refresh_filter()
        self._refresh_cart()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("category-"):
            self.select_category(button_id.removeprefix("category-"))
        elif button_id.startswith("add-"):
            self.add_to_cart(self.items_by_id[int(button_id.removeprefix("add-"))])
        elif button_id == "place-order":
            self.place_order()
        else:
            return
        event.stop()

    def visible(self) -> list[MenuItem]:
        return visible_items(self.catalog, self.category_filter.category)

    def select_category(self, category: str) -> None:
        self.category_filter = select_category(category)
        log.debug("select_category category=%r visible=%d", category, len(self.visible()))
        self._refresh_filter()

    def add_to_cart(self, item: MenuItem) -> None:
        self.cart = add_item(self.cart, item)
        log.debug("add_to_cart item_id=%d lines=%d", item.id, len(self.cart))
        self._refresh_cart()
        self.notifier.notify(added_to_cart(item))

    def place_order(self) -> None:
        if not self.cart.lines:
            log.debug("place_order_blocked reason=empty_cart")
            return
        log.debug("place_order summary=%r", format_cart_summary(self.cart))
        self.notifier.notify(order_placed())
        self.cart = clear(self.cart)
        self._refresh_cart()

    def _refresh_filter(self) -> None:
        visible_ids = {item.id for item in self.visible()}
        for card in self.query(MenuCard):
            card.display = card.item.id in visible_ids
        selected = f"category-{self.category_filter.category}"
        for button in self.query(".category-button").results(Button):
            button.variant = "primary" if button.id == selected else "default"

    def _refresh_cart(self) -> None:
        summary = self.query_one("#cart-summary", Vertical)
        summary.display = bool(self.cart.lines)
        self.query_one("#cart-total", Static).update(format_cart_summary(self.cart))
