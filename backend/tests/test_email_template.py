"""
Tests for the service request HTML email body.
"""

import pytest

from request_relay.models.service_request import PhotoAttachment, ServiceRequest
from request_relay.services.email_template import (
    NORMAL_BADGE,
    URGENT_BADGE,
    render_service_request_html,
    urgency_badge,
)


def _make_request(**overrides) -> ServiceRequest:
    fields = {
        "first_name": "Dana",
        "last_name": "Reyes",
        "email": "dana@example.com",
        "phone": "604-555-0199",
        "address": "12 Birch Ave, Surrey, BC",
        "request_type": "Repair",
        "material": "Quartz",
        "description": "Crack along the seam.",
        "install_date": "2023-05-01",
        "urgency": "Normal",
        "photos": [PhotoAttachment(content="aGVsbG8=", name="seam.jpg")],
    }
    fields.update(overrides)
    return ServiceRequest(**fields)


class TestUrgencyBadge:
    """Only the exact string "Normal" selects the normal badge."""

    def test_normal(self):
        html = render_service_request_html(_make_request(urgency="Normal"))
        assert NORMAL_BADGE in html
        assert URGENT_BADGE not in html

    def test_absent_is_urgent(self):
        html = render_service_request_html(_make_request(urgency=None))
        assert URGENT_BADGE in html
        assert NORMAL_BADGE not in html

    @pytest.mark.parametrize("value", ["Urgent", "normal", "whatever", ""])
    def test_any_other_value_is_urgent(self, value):
        assert urgency_badge(_make_request(urgency=value)) == URGENT_BADGE

    def test_urgent_badge_text(self):
        assert "Urgent - Affecting daily use" in URGENT_BADGE


class TestRenderServiceRequestHtml:

    def test_contact_details(self):
        html = render_service_request_html(_make_request())
        assert "Dana Reyes" in html
        assert 'href="mailto:dana@example.com"' in html
        assert 'href="tel:604-555-0199"' in html
        assert "12 Birch Ave, Surrey, BC" in html

    def test_service_details(self):
        html = render_service_request_html(_make_request())
        assert "Repair" in html
        assert "Quartz" in html
        assert "2023-05-01" in html

    def test_missing_install_date_shows_not_provided(self):
        html = render_service_request_html(_make_request(install_date=None))
        assert "Not provided" in html

    def test_description_keeps_line_breaks(self):
        html = render_service_request_html(
            _make_request(description="Line one\nLine two")
        )
        assert "white-space:pre-wrap" in html
        assert "Line one\nLine two" in html

    def test_values_are_not_escaped(self):
        html = render_service_request_html(_make_request(material="<b>Granite</b> & more"))
        assert "<b>Granite</b> & more" in html

    def test_photo_count_footer(self):
        photos = [
            PhotoAttachment(content="YQ==", name="a.jpg"),
            PhotoAttachment(content="Yg==", name="b.jpg"),
            PhotoAttachment(content="Yw==", name="c.jpg"),
        ]
        html = render_service_request_html(_make_request(photos=photos))
        assert "3 photo(s) attached to this email." in html

    def test_section_headings(self):
        html = render_service_request_html(_make_request())
        assert "Countertop Service Request" in html
        assert "Contact Information" in html
        assert "Service Details" in html
        assert "Description" in html
