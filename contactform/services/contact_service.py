"""
Contact submission pipeline: validate -> compose -> dispatch both -> aggregate.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, List, Mapping, Optional, Tuple

from contactform.models import DispatchOutcome, MailMessage, SanitizedFields
from contactform.services.email_service import compose_messages
from contactform.utils.email_sender import send_email
from contactform.utils.settings import SmtpConfig
from contactform.utils.validators import validate_submission

logger = logging.getLogger(__name__)

RECEIVED = "received"
VALIDATION_FAILED = "validation_failed"
DISPATCHING = "dispatching"
SUCCEEDED = "succeeded"
DISPATCH_FAILED = "dispatch_failed"

Sender = Callable[[MailMessage, SmtpConfig], DispatchOutcome]


@dataclass(frozen=True)
class OrchestrationResult:
    success: bool
    state: str
    errors: List[str] = field(default_factory=list)
    echo: Optional[SanitizedFields] = None
    outcomes: Tuple[DispatchOutcome, ...] = ()


def process_submission(
    raw: Optional[Mapping[str, Any]],
    config: SmtpConfig,
    admin_email: str,
    *,
    send: Sender = send_email,
    today: Optional[date] = None,
) -> OrchestrationResult:
    """
    Run one contact form submission end to end.

    Both emails are always attempted (customer first, then admin); a failed
    confirmation does not skip the notification.
    """
    logger.debug("Contact submission state: %s", RECEIVED)
    validation = validate_submission(raw)
    if not validation.is_valid:
        logger.info("Contact submission rejected with %d validation error(s)", len(validation.errors))
        return OrchestrationResult(
            success=False,
            state=VALIDATION_FAILED,
            errors=list(validation.errors),
            echo=validation.fields,
        )

    submission = validation.submission
    logger.debug("Contact submission state: %s", DISPATCHING)
    customer_msg, admin_msg = compose_messages(submission, admin_email, today)

    customer_result = send(customer_msg, config)
    admin_result = send(admin_msg, config)

    errors = []
    if not customer_result.success:
        errors.append(f"Failed to send confirmation email: {customer_result.message}")
    if not admin_result.success:
        errors.append(f"Failed to send notification email: {admin_result.message}")

    state = SUCCEEDED if not errors else DISPATCH_FAILED
    logger.info("Contact submission from %s finished: %s", submission.contact_email, state)
    return OrchestrationResult(
        success=not errors,
        state=state,
        errors=errors,
        echo=submission.echo(),
        outcomes=(customer_result, admin_result),
    )
