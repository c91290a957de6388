#!/usr/bin/env python3
"""
Mint a bearer token for the Recipe Catalog API.

The token is signed with ``SECRET_KEY`` from the environment, so it is
only accepted by a server started with the same key.  Useful for
calling protected routes during development.

Usage:
    python create_token.py --user-id 1b4e28ba-2fa1-11d2-883f-0016d3cca427 --role admin --days 365
"""

import argparse

from recipe_catalog_api.app.core.config import settings
from recipe_catalog_api.app.core.security import TokenService


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a signed bearer token.")
    ap.add_argument("--user-id", required=True, help="Identifier embedded in the token")
    ap.add_argument("--role", default="user", help="Role embedded in the token (default: user)")
    ap.add_argument("--days", type=int, default=1, help="Lifetime in days (default: 1)")
    args = ap.parse_args()

    tokens = TokenService(settings.secret_key, algorithm=settings.algorithm)
    print(tokens.create_access_token(args.user_id, args.role, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
