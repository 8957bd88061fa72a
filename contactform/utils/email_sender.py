"""
SMTP email sending wrapper.

One synchronous attempt per message, no retries. Failures come back as a
DispatchOutcome instead of an exception so callers can report them.
"""

from __future__ import annotations
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr
from typing import Callable, Optional

from contactform.models import (
    CONFIGURATION_ERROR,
    TRANSPORT_ERROR,
    DispatchOutcome,
    MailMessage,
)
from contactform.utils.settings import SmtpConfig

logger = logging.getLogger(__name__)

SSL_PORT = 465
STARTTLS_PORT = 587

SUCCESS_MESSAGE = "Email sent successfully"
MISSING_CREDENTIALS = (
    "SMTP credentials are not set. Define SMTP_USERNAME and SMTP_PASSWORD in your .env file."
)

# (host, port, encryption, timeout) -> connected smtplib.SMTP-like client
SmtpFactory = Callable[[str, int, str, float], smtplib.SMTP]


def open_smtp(host: str, port: int, encryption: str, timeout: float) -> smtplib.SMTP:
    if encryption == "ssl":
        return smtplib.SMTP_SSL(
            host, port, timeout=timeout, context=ssl.create_default_context()
        )
    return smtplib.SMTP(host, port, timeout=timeout)


def resolve_port(config: SmtpConfig) -> int:
    """Swap the conventional port for the other mode; explicit custom ports are kept."""
    if config.encryption == "ssl" and config.port == STARTTLS_PORT:
        return SSL_PORT
    if config.encryption == "tls" and config.port == SSL_PORT:
        return STARTTLS_PORT
    return config.port


def _header(value: str) -> str:
    return (value or "").replace("\r", "").replace("\n", "").strip()


def build_mime_message(message: MailMessage, config: SmtpConfig) -> EmailMessage:
    from_addr = message.from_email or config.from_email
    from_display = message.from_name or config.from_name

    msg = EmailMessage()
    msg["From"] = formataddr((_header(from_display), _header(from_addr)))
    msg["To"] = _header(message.to_email)
    msg["Reply-To"] = formataddr(
        (_header(from_display), _header(message.reply_to or from_addr))
    )
    msg["Subject"] = _header(message.subject)
    if message.is_html:
        msg.set_content(message.body, subtype="html")
    else:
        msg.set_content(message.body)
    return msg


def send_email(
    message: MailMessage,
    config: SmtpConfig,
    *,
    smtp_factory: Optional[SmtpFactory] = None,
) -> DispatchOutcome:
    """
    Deliver one message via SMTP.
    Missing credentials fail before any connection is opened.
    """
    if not config.has_credentials:
        logger.error("SMTP credentials missing; not sending to %s", message.to_email)
        return DispatchOutcome(
            success=False,
            message=f"Email could not be sent. Error: {MISSING_CREDENTIALS}",
            error_kind=CONFIGURATION_ERROR,
        )

    connect = smtp_factory or open_smtp
    port = resolve_port(config)
    try:
        mime = build_mime_message(message, config)
    except ValueError as e:
        logger.error("Could not build message to %s: %s", message.to_email, e)
        return DispatchOutcome(
            success=False,
            message=f"Email could not be sent. Error: invalid sender or recipient address ({e})",
            error_kind=CONFIGURATION_ERROR,
        )

    if not config.encryption:
        logger.warning("Sending mail to %s:%s without encryption", config.host, port)

    logger.info(
        "Sending email to=%s host=%s port=%s mode=%s",
        message.to_email,
        config.host,
        port,
        config.encryption or "none",
    )
    try:
        with connect(config.host, port, config.encryption, config.timeout) as smtp:
            if config.encryption == "tls":
                smtp.starttls(context=ssl.create_default_context())
            smtp.login(config.username, config.password)
            smtp.send_message(mime)
    except (smtplib.SMTPException, OSError, UnicodeError) as e:
        logger.warning("SMTP send to %s failed: %s", message.to_email, e)
        return DispatchOutcome(
            success=False,
            message=f"Email could not be sent. Error: {e}",
            error_kind=TRANSPORT_ERROR,
        )

    return DispatchOutcome(success=True, message=SUCCESS_MESSAGE)
