"""
Pytest configuration and fixtures for customer account tests.

This module provides:
- In-memory SQLite database fixtures
- Deterministic clocks
- Repository and use-case fixtures
- An account factory
- A FastAPI test client bound to the test database
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from customer_accounts.config.settings import Settings, set_settings, reset_settings
from customer_accounts.core.timezone import UTC
from customer_accounts.domain.models import Account
from customer_accounts.main import app
from customer_accounts.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from customer_accounts.repositories.sqlalchemy import orm_models  # noqa: F401
from customer_accounts.repositories.sqlalchemy import SqlAlchemyAccountRepository
from customer_accounts.services import (
    AccountCreate,
    CreateAccount,
    GetAccount,
    ListAccounts,
    UpdateAccount,
    DeleteAccount,
)


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create an aware UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def ticking_clock(fixed_now) -> Callable[[], datetime]:
    """Clock that advances one second on every call, starting at fixed_now."""
    state = {"now": fixed_now - timedelta(seconds=1)}

    def _tick() -> datetime:
        state["now"] += timedelta(seconds=1)
        return state["now"]

    return _tick


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY AND USE CASE FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(test_session) -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository(test_session)


@pytest.fixture
def create_account(account_repo, ticking_clock) -> CreateAccount:
    return CreateAccount(account_repo=account_repo, clock=ticking_clock)


@pytest.fixture
def get_account(account_repo) -> GetAccount:
    return GetAccount(account_repo=account_repo)


@pytest.fixture
def list_accounts(account_repo) -> ListAccounts:
    return ListAccounts(account_repo=account_repo)


@pytest.fixture
def update_account(account_repo) -> UpdateAccount:
    return UpdateAccount(account_repo=account_repo)


@pytest.fixture
def delete_account(account_repo) -> DeleteAccount:
    return DeleteAccount(account_repo=account_repo)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(create_account) -> Callable[..., Account]:
    """Factory for creating test accounts through the create use case."""
    counter = {"n": 0}

    def _create_account(
        first_name: str = "John",
        last_name: str = "Doe",
        email: Optional[str] = None,
        **optional_fields: str,
    ) -> Account:
        counter["n"] += 1
        if email is None:
            email = f"customer{counter['n']}@example.com"
        return create_account.execute(
            AccountCreate(
                first_name=first_name,
                last_name=last_name,
                email=email,
                **optional_fields,
            )
        )

    return _create_account


@pytest.fixture
def sample_account(account_factory) -> Account:
    """Create a sample account with every optional field populated."""
    return account_factory(
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
        phone_number="1234567890",
        address="123 Main St",
        city="New York",
        state="NY",
        country="USA",
    )


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, tmp_path) -> TestClient:
    """Provide FastAPI test client with test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    # Keep the lifespan's init_db away from the real data directory
    set_settings(Settings(data_dir=tmp_path))
    reset_database()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()
