"""Toast notifications raised after user actions."""

from __future__ import annotations

from typing import Protocol

from textual.app import App

from burger_palace.config import (
    ADDED_TO_CART_TIMEOUT_SECONDS,
    MESSAGE_SENT_TIMEOUT_SECONDS,
    ORDER_PLACED_TIMEOUT_SECONDS,
)
from burger_palace.models import MenuItem, Notification, RestaurantInfo

DESTRUCTIVE = "destructive"


class Notifier(Protocol):
    """Receives toast requests; callers never wait on the outcome."""

    def notify(self, notification: Notification) -> None: ...


class TextualNotifier:
    """Show notifications as Textual toasts."""

    def __init__(self, app: App) -> None:
        self.app = app

    def notify(self, notification: Notification) -> None:
        severity = "error" if notification.variant == DESTRUCTIVE else "information"
        if notification.duration is None:
            self.app.notify(notification.description, title=notification.title, severity=severity)
            return
        self.app.notify(
            notification.description,
            title=notification.title,
            severity=severity,
            timeout=notification.duration,
        )


def added_to_cart(item: MenuItem) -> Notification:
    return Notification(
        title="Added to Cart",
        description=f"{item.name} has been added to your cart.",
        duration=ADDED_TO_CART_TIMEOUT_SECONDS,
    )


def order_placed() -> Notification:
    return Notification(
        title="Order Placed!",
        description="Your order has been received. We'll call you soon!",
        duration=ORDER_PLACED_TIMEOUT_SECONDS,
    )


def contact_invalid() -> Notification:
    return Notification(title="Error", description="Please fill in all fields.", variant=DESTRUCTIVE)


def contact_sent() -> Notification:
    return Notification(
        title="Message Sent!",
        description="Thanks for contacting us. We'll get back to you soon!",
        duration=MESSAGE_SENT_TIMEOUT_SECONDS,
    )


def call_to_order(info: RestaurantInfo) -> Notification:
    """Phone prompt for the hero "Order Now" button."""
    return Notification(title="Order Now", description=f"Call us at {info.phone} to place your order.")
