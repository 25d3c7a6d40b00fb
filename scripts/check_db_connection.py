#!/usr/bin/env python3
"""
Database connection health check.

Connects with the configured database_url, runs a trivial query and reports
whether the customer_accounts table exists.
Usage: from project root:
  python scripts/check_db_connection.py
"""
import sys

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from customer_accounts.config.settings import get_settings
from customer_accounts.repositories.sqlalchemy import build_engine
from customer_accounts.repositories.sqlalchemy.orm_models import AccountORM


def check_connection(database_url: str) -> int:
    """Run the checks and return a process exit code."""
    print("\n=== Database Connection Health Check ===\n")
    print(f"URL: {database_url}\n")

    engine = build_engine(database_url)
    try:
        with engine.connect() as conn:
            print("Step 1: Testing connection...")
            conn.execute(text("SELECT 1"))
            print("✓ Connected\n")

            print("Step 2: Checking schema...")
            if inspect(conn).has_table(AccountORM.__tablename__):
                print(f"✓ Table '{AccountORM.__tablename__}' exists\n")
            else:
                print(f"⚠ Table '{AccountORM.__tablename__}' is missing.")
                print("  It is created on first application start.\n")

            print(f"Dialect: {engine.dialect.name}\n")
    except SQLAlchemyError as e:
        print(f"\n✗ Database connection check failed: {e}\n")
        return 1
    finally:
        engine.dispose()

    print("=== All Checks Passed ===\n")
    return 0


def main() -> int:
    return check_connection(get_settings().get_database_url())


if __name__ == "__main__":
    sys.exit(main())
