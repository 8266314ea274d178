"""
Runtime configuration.

Values are read from the process environment on every call so that a
missing credential is reported per request rather than at import time.
A local .env file is loaded once for development.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BREVO_API_URL = "https://api.brevo.com/v3/smtp/email"
DEFAULT_TIMEOUT_SECONDS = 30.0

DEFAULT_SENDER_NAME = "FloForm Service Request"
DEFAULT_SENDER_EMAIL = "sam@sccountertops.ca"
DEFAULT_RECIPIENT_NAME = "FloForm Service Team"
DEFAULT_RECIPIENT_EMAIL = "sbeaumont@floform.com"


@dataclass(frozen=True)
class EmailSettings:
    """Fixed sender/recipient identities and provider endpoint."""

    sender_name: str
    sender_email: str
    recipient_name: str
    recipient_email: str
    api_url: str
    timeout: float


def get_brevo_api_key() -> str:
    """Return the Brevo API key, or an empty string when unset."""
    return os.getenv("BREVO_API_KEY") or ""


def _get_timeout() -> float:
    raw = os.getenv("BREVO_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            f"Ignoring non-numeric BREVO_TIMEOUT_SECONDS={raw!r}; "
            f"using {DEFAULT_TIMEOUT_SECONDS}s"
        )
        return DEFAULT_TIMEOUT_SECONDS


def load_email_settings() -> EmailSettings:
    """
    Build EmailSettings from the environment.

    Every value falls back to a default, so only BREVO_API_KEY has to be
    provided by the deployment.
    """
    return EmailSettings(
        sender_name=os.getenv("SENDER_NAME") or DEFAULT_SENDER_NAME,
        sender_email=os.getenv("SENDER_EMAIL") or DEFAULT_SENDER_EMAIL,
        recipient_name=os.getenv("RECIPIENT_NAME") or DEFAULT_RECIPIENT_NAME,
        recipient_email=os.getenv("RECIPIENT_EMAIL") or DEFAULT_RECIPIENT_EMAIL,
        api_url=os.getenv("BREVO_API_URL") or DEFAULT_BREVO_API_URL,
        timeout=_get_timeout(),
    )
