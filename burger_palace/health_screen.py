"""Liveness page shown instead of the site on the ``/health`` route."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Button, Static

from burger_palace.data import RESTAURANT_INFO
from burger_palace.health import health_report

log = logging.getLogger(__name__)


def format_health_rows(report: dict[str, object]) -> Text:
    """Render Status/Version/Environment/Timestamp rows."""
    text = Text()
    rows = (
        ("Status", report["status"]),
        ("Version", report["version"]),
        ("Environment", report["environment"]),
        ("Timestamp", report["timestamp"]),
    )
    for idx, (label, value) in enumerate(rows):
        if idx > 0:
            text.append("\n")
        text.append(f"{label}".ljust(13), style="bold")
        if label == "Status":
            text.append(f" {value} ", style="bold #166534 on #dcfce7")
        else:
            text.append(str(value))
    return text


class HealthCheckApp(App):
    """Static health page reporting the running version and environment."""

    TITLE = f"{RESTAURANT_INFO.name} Health Check"

    CSS = """
    Screen {
        align: center middle;
    }

    #health-card {
        width: 64;
        height: auto;
        border: round $success;
        background: $panel;
        padding: 1 2;
    }

    #health-title {
        text-style: bold;
        text-align: center;
        width: 100%;
    }

    #health-message {
        color: $text-muted;
        text-align: center;
        width: 100%;
        margin-bottom: 1;
    }

    #refresh {
        width: 100%;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ("r", "refresh_report", "Refresh"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.report: dict[str, object] = {}

    def compose(self) -> ComposeResult:
        with Container(id="health-card"):
            yield Static(f"✔ {RESTAURANT_INFO.name} Health Check", id="health-title")
            yield Static("Application is running successfully!", id="health-message")
            yield Static(id="health-details")
            yield Button("Refresh Health Check", id="refresh", variant="primary")

    def on_mount(self) -> None:
        self.action_refresh_report()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "refresh":
            self.action_refresh_report()

    def action_refresh_report(self) -> None:
        self.report = health_report()
        log.debug("health_refresh report=%r", self.report)
        self.query_one("#health-details", Static).update(format_health_rows(self.report))
