"""Application context for in-process use of the account use cases.

Provides the same operations as the HTTP API without going through FastAPI.
Used by the maintenance scripts.
"""

from pathlib import Path
from typing import Optional

from customer_accounts.config.settings import Settings, set_settings, get_settings
from customer_accounts.repositories.sqlalchemy.database import (
    init_db,
    init_db_with_path,
    reset_database,
    get_session,
)
from customer_accounts.repositories.sqlalchemy import SqlAlchemyAccountRepository
from customer_accounts.services import (
    CreateAccount,
    GetAccount,
    ListAccounts,
    UpdateAccount,
    DeleteAccount,
)


class AppContext:
    """In-process access to the customer account use cases."""

    def __init__(self, data_dir: Optional[Path] = None):
        self._data_dir = data_dir
        self._session = None
        self._initialized = False

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Initialize or reinitialize the database connection.

        Args:
            data_dir: Directory for a SQLite database. When neither this nor the
                constructor argument is given, the configured database_url is used.
        """
        if data_dir:
            self._data_dir = data_dir

        self.close()
        reset_database()

        if self._data_dir is not None:
            settings = Settings(data_dir=self._data_dir)
            set_settings(settings)
            init_db_with_path(settings.get_data_dir() / "customer_accounts.db")
        else:
            init_db()

        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def data_dir(self) -> Path:
        return get_settings().get_data_dir()

    def _get_account_repo(self) -> SqlAlchemyAccountRepository:
        if self._session is None:
            self._session = get_session()
        return SqlAlchemyAccountRepository(self._session)

    @property
    def create_account(self) -> CreateAccount:
        return CreateAccount(account_repo=self._get_account_repo())

    @property
    def get_account(self) -> GetAccount:
        return GetAccount(account_repo=self._get_account_repo())

    @property
    def list_accounts(self) -> ListAccounts:
        return ListAccounts(account_repo=self._get_account_repo())

    @property
    def update_account(self) -> UpdateAccount:
        return UpdateAccount(account_repo=self._get_account_repo())

    @property
    def delete_account(self) -> DeleteAccount:
        return DeleteAccount(account_repo=self._get_account_repo())

    def close(self) -> None:
        """Clean up resources."""
        if self._session:
            self._session.close()
            self._session = None
