#!/usr/bin/env python3
"""Smoke test for a running API server."""

import sys
from datetime import date, timedelta

import httpx


BASE_URL = "http://127.0.0.1:8000"


def check_search():
    """Search the catalog for a term that hits several fields."""
    print("=" * 60)
    print("Testing GET /api/v1/catalog/search")
    print("=" * 60)

    try:
        response = httpx.get(f"{BASE_URL}/api/v1/catalog/search", params={"q": "plumb"}, timeout=10.0)
        response.raise_for_status()

        data = response.json()
        print(f"✅ Success! {len(data)} results:\n")
        for r in data:
            print(f"  [{r['relevance']}] {r['category_id']}/{r['sub_category_id']}: {r['service']['name']}")
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False


def check_estimate():
    """Estimate the combined cost of two issues."""
    print("\n" + "=" * 60)
    print("Testing POST /api/v1/issues/estimate")
    print("=" * 60)

    payload = {"issue_ids": ["clogged-drain", "pipe-leak", "unknown-issue"]}
    try:
        response = httpx.post(f"{BASE_URL}/api/v1/issues/estimate", json=payload, timeout=10.0)
        response.raise_for_status()

        data = response.json()
        print(f"✅ Success! Estimate: ${data['min']} - ${data['max']}")
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False


def check_lead_submission():
    """Submit a scheduled lead through the intake endpoint."""
    print("\n" + "=" * 60)
    print("Testing POST /api/v1/leads")
    print("=" * 60)

    payload = {
        "category": "residential",
        "subcategory": "plumbing",
        "service_type": "scheduled",
        "name": "Jane Smith",
        "email": "jane@example.com",
        "phone": "(555) 123-4567",
        "address": {"address": "1 Main St", "city": "Springfield", "state": "IL", "zip_code": "62701"},
        "description": "Kitchen sink drains slowly",
        "preferred_date": (date.today() + timedelta(days=3)).isoformat(),
        "preferred_time": "09:00",
    }
    try:
        response = httpx.post(f"{BASE_URL}/api/v1/leads", json=payload, timeout=10.0)
        response.raise_for_status()

        data = response.json()
        print(f"✅ Success! Lead ID: {data['id']} status={data['status']}")
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False
    except httpx.HTTPError as e:
        print(f"❌ Error: {e}")
        return False


def main():
    """Run all checks."""
    print("\n🚀 Smoke testing Maintenance Service Hub API\n")

    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
        print("✅ Server is running\n")
    except httpx.HTTPError:
        print("❌ Server is not running!")
        print("   Please start it with: uvicorn servicehub.main:app --reload")
        sys.exit(1)

    ok = all([check_search(), check_estimate(), check_lead_submission()])

    print("\n" + "=" * 60)
    print("✅ Checks complete!" if ok else "❌ Some checks failed")
    print("=" * 60 + "\n")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
