#!/usr/bin/env python3

import json
import sys

from transvoucher.webhooks.signature import generate_signature


def make_signature(secret: str, payload: str) -> str:
    """Canonical signature header value for a test delivery."""
    return generate_signature(payload, secret)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 2:
        print("Usage: make_sig.py <secret> <payload>", file=sys.stderr)
        return 1

    secret, payload = argv

    # Validate payload is valid JSON
    try:
        json.loads(payload)
    except json.JSONDecodeError:
        print("Error: Payload must be valid JSON", file=sys.stderr)
        return 1

    print(make_signature(secret, payload))
    return 0


if __name__ == "__main__":
    sys.exit(main())
