"""Shared fixtures: recording collaborators and small catalogs."""

from decimal import Decimal

import pytest

from burger_palace.models import MenuItem, Notification


class RecordingNotifier:
    def __init__(self):
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.notifications]


class RecordingNavigator:
    def __init__(self):
        self.sections: list[str] = []

    def scroll_to_section(self, section_id: str) -> None:
        self.sections.append(section_id)


def _make_item(item_id: int, price: str, category: str = "burgers", name: str | None = None) -> MenuItem:
    return MenuItem(
        id=item_id,
        name=name or f"Item {item_id}",
        description="test item",
        price=Decimal(price),
        category=category,
    )


@pytest.fixture
def make_item():
    """Factory for catalog items with a given id, price and category."""
    return _make_item


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def burger():
    return _make_item(1, "12.99", "burgers", "Classic Cheeseburger")


@pytest.fixture
def fries():
    return _make_item(11, "4.99", "sides", "Classic Fries")
