"""
Service request router.

Accepts the front-end form submission and relays it to the service team as
a Brevo transactional email, so the browser never sees the Brevo API key.

Environment variables
---------------------
BREVO_API_KEY     Brevo API key (required; checked on every request).
See request_relay.config for the optional sender/recipient overrides.

Endpoints:
  POST /   : validate, render, send; returns {"success": true}

Every other method on the same path answers 405 with the JSON error body
used by the rest of this endpoint, rather than FastAPI's default.
"""

import logging

from fastapi import APIRouter, Request

from request_relay.config import get_brevo_api_key, load_email_settings
from request_relay.errors import (
    ConfigurationError,
    InvalidRequestBodyError,
    MethodNotAllowedError,
)
from request_relay.models.service_request import parse_service_request
from request_relay.services.brevo_client import (
    build_email_payload,
    send_transactional_email,
)
from request_relay.services.email_template import render_service_request_html

logger = logging.getLogger(__name__)

router = APIRouter()

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route("", methods=_ALL_METHODS)
async def send_service_request(request: Request) -> dict:
    """
    Validate the submission and send it as one email.

    Checks run in a fixed order and stop at the first failure: method,
    API key, JSON body, required fields, photos. Nothing is sent unless
    all of them pass.
    """
    if request.method != "POST":
        raise MethodNotAllowedError()

    api_key = get_brevo_api_key()
    if not api_key:
        logger.error("BREVO_API_KEY is not configured; rejecting service request")
        raise ConfigurationError()

    try:
        data = await request.json()
    except (ValueError, RecursionError):
        raise InvalidRequestBodyError()

    service_request = parse_service_request(data)

    settings = load_email_settings()
    html_content = render_service_request_html(service_request)
    payload = build_email_payload(service_request, html_content, settings)

    await send_transactional_email(
        payload,
        api_key,
        api_url=settings.api_url,
        timeout=settings.timeout,
    )

    logger.info(
        f"Service request relayed: type={service_request.request_type!r} "
        f"photos={len(service_request.photos)}"
    )
    return {"success": True}
