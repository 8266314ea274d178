"""
HTML email body for a service request.

Builds the notification the service team receives. Values are interpolated
verbatim (no escaping). Layout uses inline styles only.

Public API:
  render_service_request_html(request: ServiceRequest) -> str
  urgency_badge(request: ServiceRequest) -> str
"""

from request_relay.models.service_request import ServiceRequest

# ---------------------------------------------------------------------------
# Palette and shared inline styles
# ---------------------------------------------------------------------------

_BRAND_GREEN = "#5b7b2f"
_URGENT_RED = "#c0392b"
_MUTED = "#6b6b6b"
_BORDER = "#d6d9d0"

_FONT_STACK = "-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,Arial,sans-serif"

_LABEL_STYLE = f"padding:4px 12px 4px 0;color:{_MUTED};"
_VALUE_STYLE = "padding:4px 0;"
_LINK_STYLE = f"color:{_BRAND_GREEN};"
_TABLE_STYLE = "width:100%;font-size:14px;border-collapse:collapse;"

NOT_PROVIDED = "Not provided"

NORMAL_BADGE = f'<span style="color:{_BRAND_GREEN};font-weight:600;">Normal</span>'
URGENT_BADGE = (
    f'<span style="color:{_URGENT_RED};font-weight:600;">'
    "Urgent - Affecting daily use</span>"
)


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

def _section_heading(title: str, first: bool = False) -> str:
    margin = "0 0 16px" if first else "24px 0 16px"
    return (
        f'<h2 style="color:{_BRAND_GREEN};font-size:16px;margin:{margin};'
        f'border-bottom:2px solid #f0f4ea;padding-bottom:8px;">{title}</h2>'
    )


def _row(label: str, value: str, first: bool = False, value_style: str = "") -> str:
    # The first row fixes the label column width for the whole table.
    label_style = _LABEL_STYLE + ("width:140px;" if first else "")
    return (
        f'<tr><td style="{label_style}">{label}</td>'
        f'<td style="{_VALUE_STYLE}{value_style}">{value}</td></tr>'
    )


def _table(rows: list[str]) -> str:
    return f'<table style="{_TABLE_STYLE}">' + "".join(rows) + "</table>"


def urgency_badge(request: ServiceRequest) -> str:
    """Return the Normal badge for urgency == "Normal", otherwise the Urgent one."""
    return NORMAL_BADGE if request.is_normal_urgency else URGENT_BADGE


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def render_service_request_html(request: ServiceRequest) -> str:
    """
    Render the email body for a validated service request.

    Sections: contact information, service details (with the urgency badge),
    the free-text description in a pre-wrap block so line breaks survive,
    and a footer with the number of attached photos.
    """
    contact = _table([
        _row("Name", request.full_name, first=True),
        _row(
            "Email",
            f'<a href="mailto:{request.email}" style="{_LINK_STYLE}">{request.email}</a>',
        ),
        _row(
            "Phone",
            f'<a href="tel:{request.phone}" style="{_LINK_STYLE}">{request.phone}</a>',
        ),
        _row("Service Address", request.address),
    ])

    details = _table([
        _row("Request Type", request.request_type, first=True, value_style="font-weight:600;"),
        _row("Material", request.material),
        _row("Install Date", request.install_date or NOT_PROVIDED),
        _row("Urgency", urgency_badge(request)),
    ])

    description = (
        '<p style="font-size:14px;line-height:1.6;white-space:pre-wrap;'
        f'background:#f5f6f3;padding:12px 16px;border-radius:6px;">{request.description}</p>'
    )

    footer = (
        f'<p style="font-size:13px;color:{_MUTED};margin-top:24px;'
        f'border-top:1px solid {_BORDER};padding-top:12px;">'
        f"{len(request.photos)} photo(s) attached to this email.</p>"
    )

    return (
        f'<div style="font-family:{_FONT_STACK};max-width:600px;margin:0 auto;color:#2d2d2d;">'
        f'<div style="background:{_BRAND_GREEN};padding:20px 24px;border-radius:8px 8px 0 0;">'
        '<h1 style="margin:0;color:#fff;font-size:20px;">Countertop Service Request</h1>'
        "</div>"
        f'<div style="border:1px solid {_BORDER};border-top:none;padding:24px;'
        'border-radius:0 0 8px 8px;">'
        + _section_heading("Contact Information", first=True)
        + contact
        + _section_heading("Service Details")
        + details
        + _section_heading("Description")
        + description
        + footer
        + "</div></div>"
    )
