#!/usr/bin/env python3
"""
Create a user account directly in the configured database.

Usage:
  python scripts/add_user.py --email user@example.com --password secret [--name "Alice"] [--status 1]
"""
from __future__ import annotations

import argparse
import logging
import sys

from accounts.core.logging_config import configure_logging
from accounts.services.user_service import UserService, UserServiceError

logger = logging.getLogger("accounts.scripts.add_user")


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create a user account")
    ap.add_argument("--email", required=True, help="Login e-mail (must be unique)")
    ap.add_argument("--password", required=True, help="Plaintext password, stored hashed")
    ap.add_argument("--name", default="", help="Display name")
    ap.add_argument("--status", type=int, default=1, help="0 keeps the account disabled")
    ap.add_argument("--database-url", help="Override DATABASE_URL")
    args = ap.parse_args(argv)

    email = (args.email or "").strip()
    if not email:
        raise SystemExit("Invalid e-mail")

    configure_logging()
    service = UserService.from_settings(args.database_url)
    try:
        service.create(email, args.password, args.name, args.status)
        user = service.get_user_by_email(email)
    finally:
        service.close()
    logger.info("user %s created", email)
    print("OK: user created")
    print(f"  ID: {user.id}")
    print(f"  UUID: {user.uuid}")
    print(f"  Status: {user.status}")


if __name__ == "__main__":
    try:
        main()
    except UserServiceError as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
