"""Static page sections: header nav, hero, about and footer."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from burger_palace.constant import ABOUT_STATS, ABOUT_STORY, COPYRIGHT_YEAR, FOOTER_BLURB, HERO_BLURB
from burger_palace.data import RESTAURANT_INFO, TESTIMONIALS
from burger_palace.navigation import NAV_SECTIONS, Navigator
from burger_palace.notifications import Notifier, call_to_order
from burger_palace.rendering import ACCENT, format_testimonial


class Section(Vertical):
    """A full-width page section that grows with its content."""

    DEFAULT_CSS = """
    Section {
        height: auto;
        padding: 1 2;
    }

    Section .section-title {
        text-style: bold;
        text-align: center;
        width: 100%;
        margin-bottom: 1;
    }

    Section .section-subtitle {
        color: $text-muted;
        text-align: center;
        width: 100%;
        margin-bottom: 1;
    }
    """


class SiteHeader(Horizontal):
    """Brand name and section navigation, docked at the top of the page."""

    DEFAULT_CSS = """
    SiteHeader {
        dock: top;
        height: 3;
        background: $panel;
        padding: 0 1;
    }

    #brand {
        width: 1fr;
        content-align: left middle;
        height: 3;
        text-style: bold;
        color: #ea580c;
    }

    SiteHeader Button {
        min-width: 10;
        margin-left: 1;
    }
    """

    def __init__(self, navigator: Navigator) -> None:
        super().__init__(id="site-header")
        self.navigator = navigator

    def compose(self) -> ComposeResult:
        yield Static(f"🍔 {RESTAURANT_INFO.name}", id="brand")
        for section_id, label in NAV_SECTIONS:
            yield Button(label, id=f"nav-{section_id}")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.startswith("nav-"):
            return
        self.navigator.scroll_to_section(button_id.removeprefix("nav-"))
        event.stop()


class HeroSection(Section):
    """Banner with the restaurant name and the View Menu / Order Now actions."""

    DEFAULT_CSS = """
    HeroSection {
        background: #1c1917;
        padding: 2 4;
    }

    #hero-name {
        text-style: bold;
        color: #ea580c;
        text-align: center;
        width: 100%;
    }

    #hero-tagline, #hero-blurb {
        text-align: center;
        width: 100%;
        margin-top: 1;
    }

    #hero-actions {
        height: auto;
        align: center middle;
        margin-top: 1;
    }

    #hero-actions Button {
        margin: 0 1;
    }
    """

    def __init__(self, navigator: Navigator, notifier: Notifier) -> None:
        super().__init__(id="hero")
        self.navigator = navigator
        self.notifier = notifier

    def compose(self) -> ComposeResult:
        yield Static(RESTAURANT_INFO.name.upper(), id="hero-name")
        yield Static(RESTAURANT_INFO.tagline, id="hero-tagline")
        yield Static(HERO_BLURB, id="hero-blurb")
        with Horizontal(id="hero-actions"):
            yield Button("View Menu", id="view-menu", variant="warning")
            yield Button("Order Now", id="order-now")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "view-menu":
            self.navigator.scroll_to_section("menu")
        elif event.button.id == "order-now":
            self.notifier.notify(call_to_order(RESTAURANT_INFO))
        else:
            return
        event.stop()


class AboutSection(Section):
    """Our story, headline stats and customer testimonials."""

    DEFAULT_CSS = """
    #about-story {
        height: auto;
    }

    #about-stats {
        height: auto;
        margin: 1 0;
    }

    .stat {
        width: 1fr;
        height: auto;
        text-align: center;
        border: round $primary;
    }

    #testimonials {
        height: auto;
    }

    .testimonial {
        width: 1fr;
        height: auto;
        border: round $secondary;
        padding: 0 1;
        margin: 0 1;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="about")

    def compose(self) -> ComposeResult:
        yield Static("About Us", classes="section-title")
        yield Static("Our story, passion, and commitment to excellence", classes="section-subtitle")
        with Vertical(id="about-story"):
            yield Static(Text("Our Story", style="bold"))
            yield Static(RESTAURANT_INFO.description)
            yield Static(ABOUT_STORY)
        with Horizontal(id="about-stats"):
            for value, label in ABOUT_STATS:
                stat = Text()
                stat.append(value, style=f"bold {ACCENT}")
                stat.append(f"\n{label}")
                yield Static(stat, classes="stat")
        yield Static("What Our Customers Say", classes="section-title")
        with Horizontal(id="testimonials"):
            for testimonial in TESTIMONIALS:
                yield Static(format_testimonial(testimonial), classes="testimonial", id=f"testimonial-{testimonial.id}")


class FooterSection(Section):
    """Restaurant details, quick links and copyright line."""

    DEFAULT_CSS = """
    FooterSection {
        background: #111827;
    }

    #footer-columns {
        height: auto;
    }

    .footer-column {
        width: 1fr;
        height: auto;
        padding: 0 1;
    }

    .footer-link {
        min-width: 10;
        height: 1;
        border: none;
        background: transparent;
    }

    #copyright {
        margin-top: 1;
        color: $text-muted;
        text-align: center;
        width: 100%;
    }
    """

    def __init__(self, navigator: Navigator) -> None:
        super().__init__(id="footer")
        self.navigator = navigator

    def compose(self) -> ComposeResult:
        info = RESTAURANT_INFO
        with Horizontal(id="footer-columns"):
            with Vertical(classes="footer-column"):
                yield Static(Text(info.name, style=f"bold {ACCENT}"))
                yield Static(info.tagline)
                yield Static(FOOTER_BLURB, classes="section-subtitle")
            with Vertical(classes="footer-column"):
                yield Static(Text("Quick Links", style="bold"))
                for section_id, label in NAV_SECTIONS:
                    yield Button(label, id=f"footer-link-{section_id}", classes="footer-link")
            with Vertical(classes="footer-column"):
                yield Static(Text("Contact Info", style="bold"))
                yield Static(f"{info.address}\n{info.city}\n{info.phone}\n{info.email}")
        yield Static(f"© {COPYRIGHT_YEAR} {info.name}. All rights reserved.", id="copyright")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if not button_id.startswith("footer-link-"):
            return
        self.navigator.scroll_to_section(button_id.removeprefix("footer-link-"))
        event.stop()
