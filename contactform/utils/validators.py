"""
Contact form sanitization and validation.

sanitize_input() is idempotent: its output contains no backslashes, no raw
markup characters, and every '&' already starts an entity.
"""

from __future__ import annotations
import re
from typing import Any, Mapping, Optional

from contactform.models import FORM_FIELDS, SanitizedFields, Submission, ValidationResult

NAME_MIN_LEN = 2
COMMENTS_MIN_LEN = 10

NAME_ERROR = "Contact name must be at least 2 characters long."
EMAIL_ERROR = "Please provide a valid email address."
REASON_ERROR = "Please select a reason for contact."
COMMENTS_ERROR = "Comments must be at least 10 characters long."

_SLASHED_RE = re.compile(r"\\(.?)", re.DOTALL)
# '&' that does not already open a named or numeric entity
_BARE_AMP_RE = re.compile(r"&(?!(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);)")
_MARKUP_CHARS = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "\\": "&#92;",
}

# dot-atom local part, then a domain of 1-63 char labels ending in an alphabetic TLD
_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
EMAIL_RE = re.compile(
    rf"^{_ATOM}(?:\.{_ATOM})*"
    r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63}$"
)


def strip_slashes(value: str) -> str:
    """Drop escaping backslashes: '\\x' -> 'x', '\\\\' -> '\\'."""
    return _SLASHED_RE.sub(r"\1", value)


def escape_once(value: str) -> str:
    """HTML-escape without re-encoding entities that are already present."""
    out = _BARE_AMP_RE.sub("&amp;", value)
    for ch, entity in _MARKUP_CHARS.items():
        out = out.replace(ch, entity)
    return out


def sanitize_input(value: Any) -> str:
    if value is None:
        return ""
    data = str(value).strip()
    data = strip_slashes(data)
    data = escape_once(data)
    return data.strip()


def is_valid_email(email: str) -> bool:
    if not email or len(email) > 254:
        return False
    local, _, _ = email.partition("@")
    if len(local) > 64:
        return False
    return bool(EMAIL_RE.match(email))


def sanitize_fields(raw: Optional[Mapping[str, Any]]) -> SanitizedFields:
    raw = raw or {}
    return SanitizedFields(**{name: sanitize_input(raw.get(name)) for name in FORM_FIELDS})


def validate_submission(raw: Optional[Mapping[str, Any]]) -> ValidationResult:
    """
    Sanitize raw form values and run every rule (no early exit).
    Errors are ordered name, email, reason, comments.
    """
    fields = sanitize_fields(raw)
    errors = []

    if not fields.contact_name or len(fields.contact_name) < NAME_MIN_LEN:
        errors.append(NAME_ERROR)
    if not fields.contact_email or not is_valid_email(fields.contact_email):
        errors.append(EMAIL_ERROR)
    if not fields.contact_reason:
        errors.append(REASON_ERROR)
    if not fields.comments or len(fields.comments) < COMMENTS_MIN_LEN:
        errors.append(COMMENTS_ERROR)

    if errors:
        return ValidationResult(fields=fields, errors=errors)

    return ValidationResult(
        fields=fields,
        submission=Submission(
            contact_name=fields.contact_name,
            contact_email=fields.contact_email,
            contact_reason=fields.contact_reason,
            comments=fields.comments,
        ),
    )
