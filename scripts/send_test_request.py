#!/usr/bin/env python3
"""
Dev helper: post a sample service request to a running relay server.

Builds a complete form submission, attaches one or more photos (real files
via --photo, or a generated placeholder PNG), and POSTs it to
/api/service-request. The server needs BREVO_API_KEY set to actually send.

Usage
-----
# Basic: one placeholder photo, targeting localhost:8000
python scripts/send_test_request.py

# Attach real photos
python scripts/send_test_request.py --photo chip.jpg --photo seam.jpg

# Mark the request as Normal urgency
python scripts/send_test_request.py --urgency Normal

# Print the request body instead of sending it
python scripts/send_test_request.py --dry-run
"""

import argparse
import base64
import json
import sys
import textwrap
from pathlib import Path

import httpx

# 1x1 transparent PNG
_PLACEHOLDER_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


# ---------------------------------------------------------------------------
# Payload builder
# ---------------------------------------------------------------------------

def _build_photos(paths: list[str]) -> list[dict]:
    """Return [{content, name}] for each path, or one placeholder if none given."""
    if not paths:
        return [
            {
                "content": base64.b64encode(_PLACEHOLDER_PNG).decode(),
                "name": "placeholder.png",
            }
        ]

    photos = []
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise FileNotFoundError(path)
        photos.append(
            {
                "content": base64.b64encode(path.read_bytes()).decode(),
                "name": path.name,
            }
        )
    return photos


def _build_submission(args: argparse.Namespace, photos: list[dict]) -> dict:
    submission = {
        "firstName": args.first_name,
        "lastName": args.last_name,
        "email": args.email,
        "phone": "604-555-0147",
        "address": "1234 Granite Way, Surrey, BC",
        "requestType": args.request_type,
        "material": "Quartz",
        "description": "Chip on the front edge near the sink.\nNoticed last week.",
        "urgency": args.urgency,
        "photos": photos,
    }
    if args.install_date:
        submission["installDate"] = args.install_date
    return submission


def _print_response(response: httpx.Response) -> None:
    status = response.status_code
    symbol = "OK" if status == 200 else "FAIL"
    print(f"\n[{symbol}] HTTP {status}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    parser = argparse.ArgumentParser(
        prog="send_test_request.py",
        description="Send a sample service request to the relay server.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            Examples:
              python scripts/send_test_request.py
              python scripts/send_test_request.py --photo chip.jpg
              python scripts/send_test_request.py --url http://localhost:8888
        """),
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8000",
        help="Server base URL (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--photo",
        action="append",
        default=[],
        metavar="PATH",
        help="Photo to attach; repeat for several. A placeholder PNG is used if omitted.",
    )
    parser.add_argument("--first-name", default="Test")
    parser.add_argument("--last-name", default="Customer")
    parser.add_argument("--email", default="customer@example.com")
    parser.add_argument("--request-type", default="Repair")
    parser.add_argument("--install-date", default=None)
    parser.add_argument(
        "--urgency",
        default="Urgent",
        help='Urgency value; only "Normal" renders the normal badge (default: Urgent)',
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the request body without sending it.",
    )

    args = parser.parse_args()

    try:
        photos = _build_photos(args.photo)
    except FileNotFoundError as exc:
        print(f"ERROR: File not found: {exc}", file=sys.stderr)
        return 1

    submission = _build_submission(args, photos)
    endpoint = f"{args.url.rstrip('/')}/api/service-request"

    print(f"Endpoint : {endpoint}")
    print(f"From     : {args.first_name} {args.last_name} <{args.email}>")
    print(f"Photos   : {', '.join(p['name'] for p in photos)}")

    if args.dry_run:
        display = dict(submission)
        display["photos"] = [
            {"name": p["name"], "content": f"<base64, {len(p['content'])} chars>"}
            for p in photos
        ]
        print("\n[DRY RUN] Body:")
        print(json.dumps(display, indent=2))
        return 0

    try:
        response = httpx.post(endpoint, json=submission, timeout=60)
    except httpx.ConnectError:
        print(
            f"\nERROR: Could not connect to {endpoint}\n"
            "Is the server running? Start it with:\n"
            "  cd backend && uvicorn request_relay.main:app --reload",
            file=sys.stderr,
        )
        return 1
    except httpx.HTTPError as exc:
        print(f"\nERROR: {exc}", file=sys.stderr)
        return 1

    _print_response(response)
    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
