"""
Shared test data and SMTP fakes.
"""

from contactform.models import DispatchOutcome, TRANSPORT_ERROR

ADMIN_EMAIL = "admin@example.com"

VALID_FORM = {
    "contact_name": "Al",
    "contact_email": "al@example.com",
    "contact_reason": "Sales",
    "comments": "Interested in pricing details",
}


class FakeSMTP:
    """Stands in for smtplib.SMTP / SMTP_SSL and records what was done on it."""

    def __init__(self, host, port, encryption, timeout, login_error=None):
        self.host = host
        self.port = port
        self.encryption = encryption
        self.timeout = timeout
        self.login_error = login_error
        self.calls = []
        self.sent = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def starttls(self, context=None):
        self.calls.append("starttls")

    def login(self, username, password):
        self.calls.append(("login", username, password))
        if self.login_error:
            raise self.login_error
        # smtplib builds the AUTH PLAIN payload as ASCII
        f"\0{username}\0{password}".encode("ascii")

    def send_message(self, msg):
        self.calls.append("send_message")
        self.sent.append(msg)


class SmtpSpy:
    """smtp_factory that records every connection attempt."""

    def __init__(self, connect_error=None, login_error=None):
        self.connect_error = connect_error
        self.login_error = login_error
        self.connections = []
        self.attempts = 0

    def __call__(self, host, port, encryption, timeout):
        self.attempts += 1
        if self.connect_error:
            raise self.connect_error
        conn = FakeSMTP(host, port, encryption, timeout, login_error=self.login_error)
        self.connections.append(conn)
        return conn


class RecordingSender:
    """Dispatcher stub: records messages, fails for the given recipients."""

    def __init__(self, fail_to=()):
        self.fail_to = set(fail_to)
        self.messages = []

    def __call__(self, message, config):
        self.messages.append(message)
        if message.to_email in self.fail_to:
            return DispatchOutcome(
                success=False,
                message="Email could not be sent. Error: relay rejected",
                error_kind=TRANSPORT_ERROR,
            )
        return DispatchOutcome(success=True, message="Email sent successfully")


