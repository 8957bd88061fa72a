"""
Contact form handler: validate the posted form, send the confirmation and
admin notification emails, and render the result page.
"""

from flask import Blueprint, current_app, render_template, request

from contactform.models import FORM_FIELDS
from contactform.services.contact_service import process_submission
from contactform.services.email_service import format_contact_date
from contactform.utils.settings import admin_email, form_url

contact_bp = Blueprint("contact", __name__)


def _render_result(result=None):
    settings = current_app.config["CONTACT_SETTINGS"]
    return render_template(
        "contact_result.html",
        submitted=result is not None,
        result=result,
        contact_date=format_contact_date(),
        form_url=form_url(settings),
    )


@contact_bp.get("/contact")
@contact_bp.get("/formHandler")
def contact_form_info():
    """No form data on GET; explain where to submit from."""
    return _render_result()


@contact_bp.post("/contact")
@contact_bp.post("/formHandler")
def submit_contact():
    """Accept a contact form POST and render success, errors and the echoed submission."""
    raw = {name: request.form.get(name, "") for name in FORM_FIELDS}
    settings = current_app.config["CONTACT_SETTINGS"]
    result = process_submission(
        raw,
        current_app.config["SMTP_CONFIG"],
        admin_email(settings),
        send=current_app.config["MAIL_SENDER"],
    )
    return _render_result(result)
