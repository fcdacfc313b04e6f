#!/usr/bin/env python3
"""
image-smith quickstart — the whole account flow in one script.

Health check → register → login → wrong password → duplicate register.
Run with: python examples/quickstart.py

Requires: pip install httpx
Backend must be running: IMAGESMITH_JWT_SECRET=... imagesmith serve
"""

import os
import sys
import uuid

import httpx

BASE = os.environ.get("IMAGESMITH_API_URL", "http://localhost:8080").rstrip("/")


def main():
    run_id = uuid.uuid4().hex[:6]
    client = httpx.Client(base_url=BASE, timeout=10)

    # ── Health check ──────────────────────────────────────────────
    print("Checking backend health...")
    try:
        resp = client.get("/health-check")
    except httpx.ConnectError:
        print(f"Backend not reachable at {BASE}")
        sys.exit(1)
    health = resp.json()["data"]
    print(f"  Database: {'✓' if health['database'] == 'healthy' else '✗'}")
    if resp.status_code != 200:
        sys.exit(1)

    email = f"jamal-{run_id}@example.com"
    password = "Rahasia#123"

    # ── Register ──────────────────────────────────────────────────
    print("\n1. Registering account...")
    resp = client.post(
        "/auth/register",
        json={"name": "Jamal", "email": email, "password": password},
    )
    assert resp.status_code == 201, f"Failed: {resp.text}"
    account = resp.json()["data"]
    print(f"   Account: {account['name']} <{account['email']}> ({account['id'][:8]}...)")

    # ── Login ─────────────────────────────────────────────────────
    print("\n2. Logging in...")
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, f"Failed: {resp.text}"
    token = resp.json()["data"]["token"]
    print(f"   Token: {token[:24]}...")

    # ── Wrong password ────────────────────────────────────────────
    print("\n3. Logging in with a wrong password...")
    resp = client.post("/auth/login", json={"email": email, "password": "wrong"})
    print(f"   {resp.status_code} {resp.json()['message']}")

    # ── Duplicate ─────────────────────────────────────────────────
    print("\n4. Registering the same email again...")
    resp = client.post(
        "/auth/register",
        json={"name": "Jamal", "email": email, "password": password},
    )
    print(f"   {resp.status_code} {resp.json()['message']}")

    print("\nDone.")


if __name__ == "__main__":
    main()
