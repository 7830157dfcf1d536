#!/usr/bin/env python3
"""Generate a JWT signing secret accepted by the token service.

Usage:
    uv run python scripts/generate_secret.py [--bytes 48] [--env]

  --env prints a JWT_SECRET=... line ready to append to .env
"""
from __future__ import annotations

import argparse
import secrets
import sys

MIN_LENGTH = 32


def generate_secret(num_bytes: int) -> str:
    secret = secrets.token_urlsafe(num_bytes)
    if len(secret) < MIN_LENGTH:
        raise ValueError(f"secret must be at least {MIN_LENGTH} characters, got {len(secret)}")
    return secret


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a JWT signing secret")
    parser.add_argument("--bytes", type=int, default=48, help="Random bytes before encoding")
    parser.add_argument("--env", action="store_true", help="Print as a .env assignment")
    args = parser.parse_args()

    try:
        secret = generate_secret(args.bytes)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"JWT_SECRET={secret}" if args.env else secret)
    return 0


if __name__ == "__main__":
    sys.exit(main())
