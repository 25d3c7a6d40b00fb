"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from customer_accounts.repositories.sqlalchemy import SqlAlchemyAccountRepository, get_db
from customer_accounts.services import (
    CreateAccount,
    GetAccount,
    ListAccounts,
    UpdateAccount,
    DeleteAccount,
)


def get_account_repo(db: Session = Depends(get_db)) -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository(db)


def get_create_account(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> CreateAccount:
    return CreateAccount(account_repo=account_repo)


def get_get_account(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> GetAccount:
    return GetAccount(account_repo=account_repo)


def get_list_accounts(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> ListAccounts:
    return ListAccounts(account_repo=account_repo)


def get_update_account(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> UpdateAccount:
    return UpdateAccount(account_repo=account_repo)


def get_delete_account(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> DeleteAccount:
    return DeleteAccount(account_repo=account_repo)
