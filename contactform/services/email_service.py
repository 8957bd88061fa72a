"""
Builds the customer confirmation and admin notification emails.

Only accepts a validated Submission; rendering is deterministic for a given
submission and date.
"""

from __future__ import annotations
from datetime import date
from typing import Optional, Tuple

from jinja2 import Environment, PackageLoader, select_autoescape

from contactform.models import MailMessage, Submission
from contactform.utils.markup import register_filters

CUSTOMER_SUBJECT = "Thank you for contacting us!"
ADMIN_SUBJECT = "New Contact Form Submission - {date}"
DATE_FORMAT = "%m/%d/%Y"

_env = Environment(
    loader=PackageLoader("contactform", "templates/emails"),
    autoescape=select_autoescape(["html"]),
)
register_filters(_env)


def format_contact_date(day: Optional[date] = None) -> str:
    return (day or date.today()).strftime(DATE_FORMAT)


def build_customer_confirmation(submission: Submission) -> MailMessage:
    body = _env.get_template("customer_confirmation.html").render(
        contact_name=submission.contact_name
    )
    return MailMessage(
        to_email=submission.contact_email,
        subject=CUSTOMER_SUBJECT,
        body=body,
        is_html=True,
    )


def build_admin_notification(
    submission: Submission, admin_email: str, today: Optional[date] = None
) -> MailMessage:
    contact_date = format_contact_date(today)
    body = _env.get_template("admin_notification.html").render(
        submission=submission, contact_date=contact_date
    )
    return MailMessage(
        to_email=admin_email,
        subject=ADMIN_SUBJECT.format(date=contact_date),
        body=body,
        is_html=True,
    )


def compose_messages(
    submission: Submission, admin_email: str, today: Optional[date] = None
) -> Tuple[MailMessage, MailMessage]:
    """Return (customer confirmation, admin notification)."""
    return (
        build_customer_confirmation(submission),
        build_admin_notification(submission, admin_email, today),
    )
