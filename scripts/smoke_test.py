#!/usr/bin/env python3
"""
Smoke test against a running pathcodec service.

Usage:
  API_URL (optional, default http://localhost:8080)
  PATHCODEC_API_KEY (optional) exported into env for authenticated endpoints

Run:
  python3 scripts/smoke_test.py
"""

import os
import sys

import httpx

API_URL = os.getenv("API_URL", "http://localhost:8080").rstrip("/")
API_KEY = os.getenv("PATHCODEC_API_KEY", "")
TIMEOUT = 10


def headers_with_auth():
    h = {"Content-Type": "application/json"}
    if API_KEY:
        h["X-API-Key"] = API_KEY
    return h


def fail(msg):
    print("FAIL:", msg)
    sys.exit(2)


def ok(msg):
    print("OK:", msg)


def main():
    client = httpx.Client(timeout=TIMEOUT)
    base = f"{API_URL}/api/v1"
    headers = headers_with_auth()

    # 1) health
    try:
        r = client.get(f"{base}/health")
    except httpx.HTTPError as e:
        fail(f"service unreachable: {e}")
    if r.status_code != 200:
        fail(f"health failed: {r.status_code} {r.text}")
    ok("health OK")

    # 2) build a URL path and parse it back
    segments = ["Smoke Test", "v1-2 drafts"]
    r = client.post(
        f"{base}/paths/url",
        headers=headers,
        json={"segments": segments, "file_name": "notes.md"},
    )
    if r.status_code != 200:
        fail(f"url build failed: {r.status_code} {r.text}")
    url_path = r.json().get("path", "")
    if url_path != "/Smoke-Test/v1--2-drafts/notes.md":
        fail(f"unexpected url path: {url_path!r}")
    ok(f"url path OK ({url_path})")

    r = client.get(f"{base}/paths/segments", headers=headers, params={"path": url_path})
    if r.status_code != 200:
        fail(f"segments failed: {r.status_code} {r.text}")
    parsed = r.json().get("segments")
    if parsed != segments + ["notes.md"]:
        fail(f"segments did not round-trip: {parsed!r}")
    ok("segments round-trip OK")

    # 3) file size
    r = client.get(f"{base}/files/size", headers=headers, params={"bytes": 1536})
    if r.status_code != 200 or r.json().get("display") != "1.5 KB":
        fail(f"file size failed: {r.status_code} {r.text}")
    ok("file size OK")

    print("\nSMOKE TEST PASSED\n")
    client.close()


if __name__ == "__main__":
    main()
