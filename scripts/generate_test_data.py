#!/usr/bin/env python3
"""
Seed the configured database with sample customer accounts.
Usage: from project root:
  python scripts/generate_test_data.py [count]
"""

import random
import sys

from customer_accounts.app_context import AppContext
from customer_accounts.core.exceptions import DuplicateEmailError
from customer_accounts.services import AccountCreate

FIRST_NAMES = ["John", "Jane", "Maria", "Wei", "Amit", "Olga", "Kwame", "Sofia"]
LAST_NAMES = ["Doe", "Smith", "Garcia", "Chen", "Patel", "Ivanova", "Mensah", "Rossi"]
CITIES = [
    ("New York", "NY", "USA"),
    ("Los Angeles", "CA", "USA"),
    ("Toronto", "ON", "Canada"),
    ("London", None, "UK"),
]


def generate_accounts(ctx: AppContext, count: int, seed: int = 42) -> int:
    """Create up to ``count`` accounts; returns how many were new."""
    rng = random.Random(seed)
    created = 0
    for i in range(count):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        city, state, country = rng.choice(CITIES)
        data = AccountCreate(
            first_name=first,
            last_name=last,
            email=f"{first.lower()}.{last.lower()}.{i}@example.com",
            phone_number=f"555{rng.randint(1000000, 9999999)}",
            address=f"{rng.randint(1, 999)} Main St",
            city=city,
            state=state,
            country=country,
        )
        try:
            account = ctx.create_account.execute(data)
            print(f"✓ {account.full_name} <{account.email}>")
            created += 1
        except DuplicateEmailError:
            print(f"✓ {data.email} already exists")
    return created


def main() -> None:
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 20
    ctx = AppContext()
    ctx.initialize()
    try:
        created = generate_accounts(ctx, count)
        print(f"\nCreated {created} account(s)")
    finally:
        ctx.close()


if __name__ == "__main__":
    main()
