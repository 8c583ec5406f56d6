"""Main Textual app class for the single-page site."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.containers import VerticalScroll

from burger_palace.contact_section import ContactSection
from burger_palace.data import ALL_ITEMS, RESTAURANT_INFO
from burger_palace.menu_section import MenuSection
from burger_palace.navigation import Navigator, TextualNavigator
from burger_palace.notifications import Notifier, TextualNotifier
from burger_palace.sections import AboutSection, FooterSection, HeroSection, SiteHeader

log = logging.getLogger(__name__)


class SiteApp(App):
    """Restaurant site: hero, menu with cart, about, contact and footer on one page."""

    TITLE = RESTAURANT_INFO.name
    SUB_TITLE = RESTAURANT_INFO.tagline

    CSS = """
    Screen {
        layout: vertical;
    }

    #page {
        height: 1fr;
    }
    """

    BINDINGS = [
        ("1", "go('hero')", "Home"),
        ("2", "go('menu')", "Menu"),
        ("3", "go('about')", "About"),
        ("4", "go('contact')", "Contact"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, notifier: Notifier | None = None, navigator: Navigator | None = None) -> None:
        super().__init__()
        self.notifier: Notifier = notifier or TextualNotifier(self)
        self.navigator: Navigator = navigator or TextualNavigator(self)
        log.debug("app_init catalog_items=%d", len(ALL_ITEMS))

    def compose(self) -> ComposeResult:
        yield SiteHeader(self.navigator)
        with VerticalScroll(id="page"):
            yield HeroSection(self.navigator, self.notifier)
            yield MenuSection(self.notifier)
            yield AboutSection()
            yield ContactSection(self.notifier)
            yield FooterSection(self.navigator)

    def on_mount(self) -> None:
        log.debug("on_mount size=%s", self.size)

    def action_go(self, section_id: str) -> None:
        self.navigator.scroll_to_section(section_id)
