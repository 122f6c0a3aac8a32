#!/usr/bin/env python3
"""
Simulate a GitHub webhook for local testing.

Usage:
    python scripts/simulate_webhook.py --repo owner/repo --event push
"""

import argparse
import json
import os

import httpx

from webhook_dispatcher.webhook.validator import sign_payload


def main():
    parser = argparse.ArgumentParser(description="Simulate GitHub webhook")
    parser.add_argument("--url", default="http://localhost:3000/")
    parser.add_argument("--repo", required=True, help="Repository (owner/repo)")
    parser.add_argument("--event", default="push", help="X-GitHub-Event value")
    parser.add_argument("--ref", default="refs/heads/main", help="Git ref for push events")
    parser.add_argument(
        "--secret",
        default=None,
        help="Webhook secret (or use WEBHOOK_DISPATCHER_WEBHOOK_SECRET env)",
    )

    args = parser.parse_args()

    owner, _, name = args.repo.partition("/")
    if not owner or not name:
        print("Error: --repo must be in owner/repo format")
        return 1

    payload = {
        "ref": args.ref,
        "commits": [],
        "repository": {
            "name": name,
            "full_name": args.repo,
            "owner": {"login": owner},
        },
    }
    payload_bytes = json.dumps(payload).encode()

    headers = {
        "Content-Type": "application/json",
        "X-GitHub-Event": args.event,
    }

    secret = args.secret or os.environ.get("WEBHOOK_DISPATCHER_WEBHOOK_SECRET")
    if secret:
        headers["X-Hub-Signature-256"] = sign_payload(payload_bytes, secret)
    else:
        print("No secret given, sending unsigned request")

    print(f"Sending {args.event} webhook to {args.url}")
    print(f"Payload: {json.dumps(payload, indent=2)}")

    response = httpx.post(args.url, content=payload_bytes, headers=headers)

    print(f"\nResponse status: {response.status_code}")
    print(f"Response body: {response.text}")

    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    exit(main())
