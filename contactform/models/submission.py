"""
Contact form data shapes.

SanitizedFields is what came off the wire after sanitization (used to echo
input back); Submission only exists once every validation rule has passed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

FORM_FIELDS = ("contact_name", "contact_email", "contact_reason", "comments")


@dataclass(frozen=True)
class SanitizedFields:
    contact_name: str = ""
    contact_email: str = ""
    contact_reason: str = ""
    comments: str = ""

    def as_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in FORM_FIELDS}


@dataclass(frozen=True)
class Submission:
    contact_name: str
    contact_email: str
    contact_reason: str
    comments: str

    def echo(self) -> SanitizedFields:
        return SanitizedFields(
            contact_name=self.contact_name,
            contact_email=self.contact_email,
            contact_reason=self.contact_reason,
            comments=self.comments,
        )


@dataclass(frozen=True)
class ValidationResult:
    """
    Either a Submission (errors empty) or an ordered list of error strings.

    `fields` always holds the sanitized input so it can be echoed back.
    """

    fields: SanitizedFields
    submission: Optional[Submission] = None
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.submission is not None and not self.errors
