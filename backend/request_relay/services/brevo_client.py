"""
Brevo transactional email client.

Two steps:
  build_email_payload()       : ServiceRequest + HTML -> BrevoEmailPayload
  send_transactional_email()  : one POST to Brevo, no retries

Any non-2xx response or transport failure raises EmailDeliveryError. The
provider's response body is logged here and never propagated to callers.
"""

import logging

import httpx

from request_relay.config import (
    DEFAULT_BREVO_API_URL,
    DEFAULT_TIMEOUT_SECONDS,
    EmailSettings,
)
from request_relay.errors import EmailDeliveryError
from request_relay.models.brevo import BrevoAttachment, BrevoContact, BrevoEmailPayload
from request_relay.models.service_request import ServiceRequest

logger = logging.getLogger(__name__)


def build_subject(request: ServiceRequest) -> str:
    return f"Service Request: {request.request_type} – {request.full_name}"


def build_email_payload(
    request: ServiceRequest,
    html_content: str,
    settings: EmailSettings,
) -> BrevoEmailPayload:
    """
    Assemble the Brevo payload for one service request.

    Sender and recipient come from settings; reply-to points at the
    submitter so the team can answer directly. Photos are copied in order.
    """
    return BrevoEmailPayload(
        sender=BrevoContact(name=settings.sender_name, email=settings.sender_email),
        to=[BrevoContact(email=settings.recipient_email, name=settings.recipient_name)],
        replyTo=BrevoContact(email=request.email, name=request.full_name),
        subject=build_subject(request),
        htmlContent=html_content,
        attachment=[
            BrevoAttachment(content=photo.content, name=photo.name)
            for photo in request.photos
        ],
    )


async def send_transactional_email(
    payload: BrevoEmailPayload,
    api_key: str,
    *,
    api_url: str = DEFAULT_BREVO_API_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> None:
    """
    POST the payload to Brevo exactly once.

    Args:
        payload:   The email to send.
        api_key:   Brevo API key, sent in the ``api-key`` header.
        api_url:   Send endpoint (overridable for staging).
        timeout:   Overall request timeout in seconds.

    Raises:
        EmailDeliveryError: Brevo answered non-2xx, or the request never
            completed (timeout, DNS, connection reset).
    """
    headers = {
        "accept": "application/json",
        "api-key": api_key,
        "content-type": "application/json",
    }

    body = payload.to_json()

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.post(api_url, headers=headers, content=body)
    except httpx.HTTPError as exc:
        logger.error(f"Network error sending email: {exc!r}")
        raise EmailDeliveryError() from exc

    if not response.is_success:
        logger.error(f"Brevo API error: {response.status_code} {response.text}")
        raise EmailDeliveryError()

    logger.debug(f"Brevo accepted email: {response.text}")
