#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database configured in .env is reachable and the
tables exist.
Usage: python scripts/check_connections.py  (after pip install -e .)
"""
from sqlalchemy import inspect

from app.core.config import get_settings
from app.db.postgres import check_database_connection, engine


def main():
    settings = get_settings()
    print("=" * 50)
    print("PFE ASSISTANCE LEADS - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Checking database...")
    if settings.database_url:
        print(f"    URL: {engine.url.render_as_string(hide_password=True)}")
    else:
        print(f"    URL: postgresql://{settings.postgres_user}:****@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")
    if not check_database_connection():
        print("    ❌ Database: FAILED")
        return 1
    print("    ✅ Database: CONNECTED")

    print("\n[2] Checking tables...")
    tables = set(inspect(engine).get_table_names())
    for name in ("candidates", "admin_users"):
        if name in tables:
            print(f"    ✅ {name}")
        else:
            print(f"    ⚠️  {name} missing (created on first app startup)")

    print("\n[3] Admin bootstrap...")
    if settings.admin_email and settings.admin_password:
        print(f"    ✅ ADMIN_EMAIL set: {settings.admin_email}")
    else:
        print("    ⚠️  ADMIN_EMAIL/ADMIN_PASSWORD not set, use scripts/create_admin.py")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
