#!/usr/bin/env python3
"""
Booking lifecycle smoke test against a running server.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the backend.

Usage:
    python scripts/flow_book_and_accept.py --service-id <UUID> --date 2026-11-01 --time 10:00 \
        --buyer-token <JWT> --seller-token <JWT>

Flow:
    1. Buyer books the service
    2. Buyer reads the booking back
    3. Seller lists bookings on their services
    4. Seller accepts the booking
    5. Seller accepts again (expected 400)
"""

import argparse
import json
import sys

import httpx

BASE_URL = "http://localhost:8000"


def api_request(token: str, method: str, endpoint: str, data: dict | None = None) -> dict:
    """Make authenticated API request and return the response envelope."""
    headers = {"Authorization": f"Bearer {token}"}
    response = httpx.request(
        method,
        f"{BASE_URL}{endpoint}",
        headers=headers,
        json=data,
        timeout=10.0,
        follow_redirects=True,
    )
    return response.json() if response.text else {"status": response.status_code, "msg": "", "data": None}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(result: dict, expect_status: int | None = None) -> bool:
    """Print an envelope; return whether it matched expectations."""
    ok = result.get("status") == expect_status if expect_status else result.get("status", 500) < 400
    label = "OK" if ok else "UNEXPECTED"
    print(f"{label} ({result.get('status')}): {result.get('msg')}")
    if result.get("data") is not None:
        print(json.dumps(result["data"], indent=2))
    return ok


def main():
    parser = argparse.ArgumentParser(description="Booking lifecycle flow")
    parser.add_argument("--service-id", required=True, help="Service UUID")
    parser.add_argument("--date", required=True, help="Booking date (YYYY-MM-DD)")
    parser.add_argument("--time", default="10:00", help="Booking time (HH:MM)")
    parser.add_argument("--buyer-token", required=True, help="Buyer access token")
    parser.add_argument("--seller-token", required=True, help="Seller access token")
    args = parser.parse_args()

    print_step(1, "Buyer books the service")
    created = api_request(args.buyer_token, "POST", "/api/bookings/book-now", {
        "serviceId": args.service_id,
        "date": args.date,
        "time": args.time,
    })
    if not print_result(created, expect_status=201):
        sys.exit(1)
    booking_id = created["data"]["id"]

    print_step(2, "Buyer reads the booking")
    if not print_result(api_request(args.buyer_token, "GET", f"/api/bookings/{booking_id}")):
        sys.exit(1)

    print_step(3, "Seller lists bookings")
    if not print_result(api_request(args.seller_token, "GET", "/api/bookings?role=seller")):
        sys.exit(1)

    print_step(4, "Seller accepts the booking")
    if not print_result(api_request(args.seller_token, "PATCH", f"/api/bookings/{booking_id}/accept"), 200):
        sys.exit(1)

    print_step(5, "Seller accepts again")
    if not print_result(api_request(args.seller_token, "PATCH", f"/api/bookings/{booking_id}/accept"), 400):
        sys.exit(1)

    print("\nFlow completed")


if __name__ == "__main__":
    main()
