"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import smtplib
import pytest

# Make the contactform package importable without installing it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from contactform import create_app  # noqa: E402
from contactform.utils.settings import SmtpConfig  # noqa: E402
from tests.helpers import ADMIN_EMAIL, RecordingSender, SmtpSpy  # noqa: E402


@pytest.fixture
def settings():
    return {
        "SMTP_HOST": "smtp.test.local",
        "SMTP_PORT": "587",
        "SMTP_USERNAME": "mailer@example.com",
        "SMTP_PASSWORD": "app-password",
        "SMTP_ENCRYPTION": "tls",
        "MAIL_FROM_ADDRESS": "noreply@example.com",
        "MAIL_FROM_NAME": "Website Contact",
        "CONTACT_TO_EMAIL": ADMIN_EMAIL,
    }


@pytest.fixture
def smtp_config(settings):
    return SmtpConfig.from_settings(settings)


@pytest.fixture
def smtp_spy():
    return SmtpSpy()


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def app(settings, sender):
    app = create_app(settings=settings, mail_sender=sender)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_error():
    return smtplib.SMTPAuthenticationError(535, b"5.7.8 Username and Password not accepted")
