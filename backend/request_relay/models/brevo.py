"""
Pydantic models for Brevo's transactional email API (POST /v3/smtp/email).

Field names follow Brevo's camelCase JSON so the model serializes straight
to the request body. Only the fields this service sends are modelled.
"""

import json
from typing import Optional

from pydantic import BaseModel


class BrevoContact(BaseModel):
    """A named address used for sender, recipient and reply-to."""
    email: str
    name: str


class BrevoAttachment(BaseModel):
    """Inline attachment; content is base64-encoded file bytes."""
    content: Optional[str] = None
    name: Optional[str] = None


class BrevoEmailPayload(BaseModel):
    sender: BrevoContact
    to: list[BrevoContact]
    replyTo: BrevoContact
    subject: str
    htmlContent: str
    attachment: list[BrevoAttachment] = []

    def to_json(self) -> str:
        """
        Serialize for the request body, dropping unset attachment keys.

        Non-ASCII text is \\u-escaped, so lone surrogates from the form are
        sent as escapes instead of failing UTF-8 encoding.
        """
        return json.dumps(self.model_dump(exclude_none=True))
