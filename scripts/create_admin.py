#!/usr/bin/env python3
"""
Create or reset a dashboard admin account.

Usage: python scripts/create_admin.py admin@agency.dz
       python scripts/create_admin.py admin@agency.dz --reset
The password is prompted for. Needs the package installed (pip install -e .).
"""
import argparse
import getpass

from app.core.logging_config import setup_logging
from app.db.init_db import init_db, ensure_admin


def main():
    parser = argparse.ArgumentParser(description="Create or reset a dashboard admin account")
    parser.add_argument("email")
    parser.add_argument("--reset", action="store_true", help="Reset the password of an existing account")
    args = parser.parse_args()

    password = getpass.getpass("Password: ")
    if len(password) < 8:
        parser.error("password must be at least 8 characters")
    if password != getpass.getpass("Confirm password: "):
        parser.error("passwords do not match")

    setup_logging()
    init_db()
    admin_id = ensure_admin(args.email, password, reset_password=args.reset)
    print(f"✅ Admin {args.email} ready (id {admin_id})")


if __name__ == "__main__":
    main()
