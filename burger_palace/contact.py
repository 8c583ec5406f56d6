"""Contact form submission."""

from __future__ import annotations

from dataclasses import dataclass

from burger_palace.models import ContactForm, Notification
from burger_palace.notifications import contact_invalid, contact_sent


@dataclass(frozen=True)
class ContactOutcome:
    """Result of a submit: whether it was accepted, the form to show next, and the toast."""

    accepted: bool
    form: ContactForm
    notification: Notification


def missing_fields(form: ContactForm) -> list[str]:
    """Names of the fields left empty, in form order."""
    return [name for name in ("name", "email", "message") if not getattr(form, name)]


def submit_contact(form: ContactForm) -> ContactOutcome:
    """Accept the form when every field is filled; nothing is sent anywhere."""
    if missing_fields(form):
        return ContactOutcome(accepted=False, form=form, notification=contact_invalid())
    return ContactOutcome(accepted=True, form=ContactForm(), notification=contact_sent())
