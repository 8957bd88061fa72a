from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

CONFIGURATION_ERROR = "configuration"
TRANSPORT_ERROR = "transport"


@dataclass(frozen=True)
class MailMessage:
    to_email: str
    subject: str
    body: str
    from_email: Optional[str] = None
    from_name: Optional[str] = None
    reply_to: Optional[str] = None
    is_html: bool = True


@dataclass(frozen=True)
class DispatchOutcome:
    """
    Result of one delivery attempt.

    error_kind is None on success, otherwise CONFIGURATION_ERROR when the
    transport was never touched or TRANSPORT_ERROR when it failed.
    """

    success: bool
    message: str
    error_kind: Optional[str] = None

    def __repr__(self) -> str:
        if self.success:
            return "DispatchOutcome(success=True)"
        return f"DispatchOutcome(success=False, kind={self.error_kind}, message={self.message})"
