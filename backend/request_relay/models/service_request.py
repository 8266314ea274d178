"""
Inbound service request models.

The front-end form posts camelCase JSON. ``parse_service_request`` checks it
in a fixed order and reports only the first problem. Validated values are
kept exactly as submitted (untrimmed).
"""

from typing import Any, Optional

from pydantic import BaseModel

from request_relay.errors import (
    InvalidRequestBodyError,
    MissingFieldError,
    MissingPhotosError,
)

# Declared order matters: the first missing field in this tuple is reported.
REQUIRED_FIELDS = (
    "firstName",
    "lastName",
    "email",
    "phone",
    "address",
    "requestType",
    "material",
    "description",
)

NORMAL_URGENCY = "Normal"


class PhotoAttachment(BaseModel):
    """One uploaded photo. ``content`` is passed through to the provider untouched."""

    content: Optional[str] = None   # base64 as produced by the form
    name: Optional[str] = None


class ServiceRequest(BaseModel):
    """A validated service request submission."""

    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    request_type: str
    material: str
    description: str
    install_date: Optional[str] = None
    urgency: Optional[str] = None
    photos: list[PhotoAttachment]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_normal_urgency(self) -> bool:
        # Exact match only; anything else (including absent) is urgent.
        return self.urgency == NORMAL_URGENCY


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _parse_photo(item: Any) -> PhotoAttachment:
    if not isinstance(item, dict):
        raise InvalidRequestBodyError()
    content = item.get("content")
    name = item.get("name")
    for value in (content, name):
        if value is not None and not isinstance(value, str):
            raise InvalidRequestBodyError()
    return PhotoAttachment(content=content, name=name)


def parse_service_request(data: Any) -> ServiceRequest:
    """
    Validate a decoded JSON body and build a ServiceRequest.

    Checks, in order:
      1. body is a JSON object                -> InvalidRequestBodyError
      2. each of REQUIRED_FIELDS is non-blank -> MissingFieldError(field)
      3. photos is a non-empty list           -> MissingPhotosError

    Optional fields of the wrong type are treated as absent.
    """
    if not isinstance(data, dict):
        raise InvalidRequestBodyError()

    for field in REQUIRED_FIELDS:
        if _is_blank(data.get(field)):
            raise MissingFieldError(field)

    photos = data.get("photos")
    if not isinstance(photos, list) or not photos:
        raise MissingPhotosError()

    install_date = data.get("installDate")
    urgency = data.get("urgency")

    return ServiceRequest(
        first_name=data["firstName"],
        last_name=data["lastName"],
        email=data["email"],
        phone=data["phone"],
        address=data["address"],
        request_type=data["requestType"],
        material=data["material"],
        description=data["description"],
        install_date=install_date if isinstance(install_date, str) and install_date else None,
        urgency=urgency if isinstance(urgency, str) else None,
        photos=[_parse_photo(item) for item in photos],
    )
