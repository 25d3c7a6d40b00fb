"""SQLAlchemy repository implementations."""

from customer_accounts.repositories.sqlalchemy.database import (
    build_engine,
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from customer_accounts.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository

__all__ = [
    "build_engine",
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
]
