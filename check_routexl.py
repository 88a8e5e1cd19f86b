#!/usr/bin/env python3
"""Script to verify RouteXL connectivity and credentials."""

import logging
import sys

import httpx

from routexl import Location, RouteXLClient, RouteXLError
from routexl.config import settings


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("RouteXL Connection Test")
    print("=" * 60)
    print()

    print("1. Checking RouteXL configuration...")
    if not settings.username or not settings.password:
        print("   [ERROR] RouteXL credentials are not configured")
        print("   Please set ROUTEXL_USERNAME and ROUTEXL_PASSWORD in your .env file")
        return 1

    print(f"   [OK] API endpoint: {settings.api_endpoint}")
    print(f"   [OK] Username: {settings.username}")
    print()

    client = RouteXLClient.from_settings()

    print("2. Testing RouteXL status echo...")
    try:
        client.check_status()
        print("   [OK] RouteXL is online and accepted the credentials")
    except RouteXLError as e:
        print(f"   [ERROR] {e.message} (HTTP {e.status_code})")
        return 1
    except httpx.HTTPError as e:
        print(f"   [ERROR] Could not reach RouteXL: {e}")
        return 1
    print()

    if "--tour" not in sys.argv[1:]:
        print("Skipping sample tour (pass --tour to submit one).")
        return 0

    print("3. Submitting a sample tour...")
    client.add_locations(
        [
            Location(name="Amsterdam", lat=52.3702, lng=4.8951, servicetime=5),
            Location(name="Utrecht", lat=52.0907, lng=5.1214, servicetime=5),
            {"name": "Haarlem", "lat": 52.3874, "lng": 4.6462, "servicetime": 5,
             "restrictions": {"ready": 15, "due": 60}},
        ]
    )
    try:
        client.tour()
    except RouteXLError as e:
        print(f"   [ERROR] {e.message} (HTTP {e.status_code})")
        return 1
    except httpx.HTTPError as e:
        print(f"   [ERROR] Could not reach RouteXL: {e}")
        return 1

    print(f"   [OK] {client.get_http_message()}")
    print(f"   Result: {client.get_result()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
