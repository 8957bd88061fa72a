"""
Settings for the contact form.

Configure via .env or the process environment (environment wins):
- SMTP_HOST (default smtp.gmail.com), SMTP_PORT (default 587)
- SMTP_USERNAME, SMTP_PASSWORD: required at send time, no defaults
- SMTP_ENCRYPTION: "tls" | "ssl" | "" (default tls)
- SMTP_TIMEOUT: socket timeout in seconds (default 20)
- MAIL_FROM_ADDRESS, MAIL_FROM_NAME: fallback sender
- CONTACT_TO_EMAIL: admin notification recipient
- CONTACT_FORM_URL: "back to form" link on the result page
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

DEFAULT_SMTP_HOST = "smtp.gmail.com"
DEFAULT_SMTP_PORT = 587
DEFAULT_SMTP_ENCRYPTION = "tls"
DEFAULT_SMTP_TIMEOUT = 20.0
DEFAULT_FROM_EMAIL = "noreply@example.com"
DEFAULT_FROM_NAME = "Website Contact"
DEFAULT_FORM_URL = "inputForm.html"

ENCRYPTION_MODES = ("tls", "ssl")


def load_settings(
    env_path: Optional[str] = ".env", environ: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Merge a .env file with the environment without touching os.environ.
    A missing file is fine; keys already in the environment are not overridden.
    """
    settings: Dict[str, str] = {}
    if env_path and os.path.isfile(env_path):
        settings.update({k: v for k, v in dotenv_values(env_path).items() if v is not None})
    settings.update(os.environ if environ is None else environ)
    return settings


def _get(settings: Mapping[str, str], key: str, default: str = "") -> str:
    value = (settings.get(key) or "").strip()
    return value or default


def _get_secret(settings: Mapping[str, str], key: str) -> str:
    # credentials keep surrounding whitespace; a quoted .env value is taken as-is
    value = settings.get(key) or ""
    return value if value.strip() else ""


def _get_int(settings: Mapping[str, str], key: str, default: int) -> int:
    try:
        return int(_get(settings, key, str(default)))
    except ValueError:
        return default


def _get_float(settings: Mapping[str, str], key: str, default: float) -> float:
    try:
        return float(_get(settings, key, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class SmtpConfig:
    host: str = DEFAULT_SMTP_HOST
    port: int = DEFAULT_SMTP_PORT
    username: str = ""
    password: str = ""
    encryption: str = DEFAULT_SMTP_ENCRYPTION
    from_email: str = DEFAULT_FROM_EMAIL
    from_name: str = DEFAULT_FROM_NAME
    timeout: float = DEFAULT_SMTP_TIMEOUT

    @classmethod
    def from_settings(cls, settings: Mapping[str, str]) -> "SmtpConfig":
        encryption = _get(settings, "SMTP_ENCRYPTION", DEFAULT_SMTP_ENCRYPTION).lower()
        return cls(
            host=_get(settings, "SMTP_HOST", DEFAULT_SMTP_HOST),
            port=_get_int(settings, "SMTP_PORT", DEFAULT_SMTP_PORT),
            username=_get_secret(settings, "SMTP_USERNAME"),
            password=_get_secret(settings, "SMTP_PASSWORD"),
            encryption=encryption if encryption in ENCRYPTION_MODES else "",
            from_email=_get(settings, "MAIL_FROM_ADDRESS", DEFAULT_FROM_EMAIL),
            from_name=_get(settings, "MAIL_FROM_NAME", DEFAULT_FROM_NAME),
            timeout=_get_float(settings, "SMTP_TIMEOUT", DEFAULT_SMTP_TIMEOUT),
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def __repr__(self) -> str:
        return (
            f"SmtpConfig(host={self.host!r}, port={self.port}, "
            f"username={self.username!r}, encryption={self.encryption!r})"
        )


def admin_email(settings: Mapping[str, str]) -> str:
    return (
        _get(settings, "CONTACT_TO_EMAIL")
        or _get(settings, "SMTP_USERNAME")
        or _get(settings, "MAIL_FROM_ADDRESS", DEFAULT_FROM_EMAIL)
    )


def form_url(settings: Mapping[str, str]) -> str:
    return _get(settings, "CONTACT_FORM_URL", DEFAULT_FORM_URL)
