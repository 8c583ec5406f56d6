"""Contact section: location, hours and the message form."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Label, Static, TextArea

from burger_palace.contact import ContactOutcome, missing_fields, submit_contact
from burger_palace.data import RESTAURANT_INFO
from burger_palace.models import ContactForm
from burger_palace.notifications import Notifier
from burger_palace.rendering import ACCENT, format_hours
from burger_palace.sections import Section

log = logging.getLogger(__name__)


def _card_title(icon: str, title: str) -> Text:
    text = Text()
    text.append(f"{icon} ", style=ACCENT)
    text.append(title, style="bold")
    return text


class ContactSection(Section):
    """Location, contact details, weekly hours and the message form."""

    DEFAULT_CSS = """
    #contact-layout {
        height: auto;
    }

    #contact-info, #contact-form {
        width: 1fr;
        height: auto;
        padding: 0 1;
    }

    .info-card {
        height: auto;
        border: round $secondary;
        padding: 0 1;
        margin-bottom: 1;
    }

    #contact-form {
        border: round $primary;
    }

    #contact-message {
        height: 7;
    }

    #send-message {
        width: 100%;
        margin-top: 1;
    }
    """

    def __init__(self, notifier: Notifier) -> None:
        super().__init__(id="contact")
        self.notifier = notifier

    def compose(self) -> ComposeResult:
        info = RESTAURANT_INFO
        yield Static("Contact Us", classes="section-title")
        yield Static("Have questions? We'd love to hear from you!", classes="section-subtitle")
        with Horizontal(id="contact-layout"):
            with Vertical(id="contact-info"):
                with Vertical(classes="info-card"):
                    yield Static(_card_title("📍", "Location"))
                    yield Static(f"{info.address}\n{info.city}")
                with Vertical(classes="info-card"):
                    yield Static(_card_title("📞", "Contact Info"))
                    yield Static(f"Phone: {info.phone}\nEmail: {info.email}")
                with Vertical(classes="info-card"):
                    yield Static(_card_title("🕐", "Hours"))
                    yield Static(format_hours(), id="hours")
            with Vertical(id="contact-form"):
                yield Static(Text("Send us a Message", style="bold"))
                yield Label("Name")
                yield Input(placeholder="Your name", id="contact-name")
                yield Label("Email")
                yield Input(placeholder="your@email.com", id="contact-email")
                yield Label("Message")
                yield TextArea(id="contact-message")
                yield Button("Send Message", id="send-message", variant="warning")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "send-message":
            return
        event.stop()
        self.submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit()

    def current_form(self) -> ContactForm:
        return ContactForm(
            name=self.query_one("#contact-name", Input).value,
            email=self.query_one("#contact-email", Input).value,
            message=self.query_one("#contact-message", TextArea).text,
        )

    def submit(self) -> ContactOutcome:
        """Validate the form, reset it when accepted and raise the matching toast."""
        form = self.current_form()
        outcome = submit_contact(form)
        if outcome.accepted:
            log.debug("contact_submitted name=%r email=%r", form.name, form.email)
            self._show_form(outcome.form)
        else:
            log.debug("contact_rejected missing=%r", missing_fields(form))
        self.notifier.notify(outcome.notification)
        return outcome

    def _show_form(self, form: ContactForm) -> None:
        self.query_one("#contact-name", Input).value = form.name
        self.query_one("#contact-email", Input).value = form.email
        self.query_one("#contact-message", TextArea).load_text(form.message)
