"""Scroll-to-section navigation."""

from __future__ import annotations

import logging
from typing import Protocol

from textual.app import App
from textual.css.query import NoMatches

log = logging.getLogger(__name__)

NAV_SECTIONS: tuple[tuple[str, str], ...] = (
    ("hero", "Home"),
    ("menu", "Menu"),
    ("about", "About"),
    ("contact", "Contact"),
)
SECTION_IDS = tuple(section_id for section_id, _ in NAV_SECTIONS)


class Navigator(Protocol):
    """Brings a page section into view by its id."""

    def scroll_to_section(self, section_id: str) -> None: ...


class TextualNavigator:
    """Scroll a section widget of the running app into view."""

    def __init__(self, app: App) -> None:
        self.app = app

    def scroll_to_section(self, section_id: str) -> None:
        try:
            section = self.app.query_one(f"#{section_id}")
        except NoMatches:
            log.debug("navigate_skipped section=%r reason=missing", section_id)
            return
        section.scroll_visible(animate=True, top=True)
        log.debug("navigate section=%r", section_id)
