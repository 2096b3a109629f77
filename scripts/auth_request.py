#!/usr/bin/env python3
"""
Call the API as a given user and print the response envelope.

The bearer token comes from, in order: --token, --as-user (signed locally
with JWT_SECRET_KEY, so only useful against a server sharing that secret),
or the .token file.

Usage:
    python scripts/auth_request.py GET /api/bookings
    python scripts/auth_request.py GET "/api/bookings?role=seller" --as-user <UUID>
    python scripts/auth_request.py POST /api/seller/setup -d '{"title": "...", "description": "...", "category": "tutoring", "portfolio": "..."}'
    python scripts/auth_request.py PATCH /api/bookings/<UUID>/accept --base-url https://staging.example
"""

import argparse
import json
import sys
from pathlib import Path
from uuid import UUID

import httpx

DEFAULT_BASE_URL = "http://localhost:8000"
TOKEN_FILE = Path(__file__).parent.parent / ".token"
METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


def resolve_token(token: str | None, as_user: UUID | None) -> str:
    if token:
        return token

    if as_user:
        from hustle_village.core.security import create_access_token

        return create_access_token(as_user)

    stored = TOKEN_FILE.read_text().strip() if TOKEN_FILE.exists() else ""
    if not stored:
        sys.exit("ERROR: no token. Pass --token or --as-user, or save one to .token")
    return stored


def show_envelope(response: httpx.Response) -> bool:
    """Print an ``{status, msg, data}`` body; return whether the call succeeded."""
    try:
        body = response.json()
    except json.JSONDecodeError:
        print(f"[{response.status_code}] non-JSON response")
        print(response.text)
        return response.is_success

    print(f"[{body.get('status', response.status_code)}] {body.get('msg', '')}")
    if body.get("data") is not None:
        print(json.dumps(body["data"], indent=2))
    return response.is_success


def main() -> int:
    parser = argparse.ArgumentParser(description="Authenticated request against the booking API")
    parser.add_argument("method", type=str.upper, choices=METHODS)
    parser.add_argument("endpoint", help="Path including the /api prefix")
    parser.add_argument("--data", "-d", type=json.loads, help="JSON request body")
    parser.add_argument("--token", "-t", help="Bearer token")
    parser.add_argument("--as-user", type=UUID, help="Sign a local token for this user id")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=10.0) as client:
        response = client.request(
            args.method,
            args.endpoint,
            headers={"Authorization": f"Bearer {resolve_token(args.token, args.as_user)}"},
            json=args.data,
        )

    return 0 if show_envelope(response) else 1


if __name__ == "__main__":
    sys.exit(main())
