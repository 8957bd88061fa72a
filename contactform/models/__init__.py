from .submission import FORM_FIELDS, SanitizedFields, Submission, ValidationResult
from .mail_message import (
    CONFIGURATION_ERROR,
    TRANSPORT_ERROR,
    DispatchOutcome,
    MailMessage,
)

__all__ = [
    "FORM_FIELDS",
    "SanitizedFields",
    "Submission",
    "ValidationResult",
    "MailMessage",
    "DispatchOutcome",
    "CONFIGURATION_ERROR",
    "TRANSPORT_ERROR",
]
