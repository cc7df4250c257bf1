#!/usr/bin/env python3
"""
Mint a bearer token for local testing of the write endpoints.

Production tokens are issued by the identity provider; this script
signs one with the same shared secret (``JWT_SECRET``) so the API can
be exercised without it.

Usage:
    JWT_SECRET=... python create_token.py --sub owner@example.com --days 7
"""

import argparse

from portfolio_api.app.core.security import create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description="Create an HS256 bearer token for the portfolio API")
    parser.add_argument("--sub", default="portfolio-owner", help="Subject claim (default: portfolio-owner)")
    parser.add_argument("--days", type=int, default=1, help="Lifetime in days (default: 1)")
    args = parser.parse_args()

    token = create_access_token(
        {"sub": args.sub, "role": "authenticated"},
        expires_delta=args.days * 24 * 60 * 60,
    )
    print(token)


if __name__ == "__main__":
    main()
