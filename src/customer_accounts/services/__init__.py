"""Service layer - customer account use cases."""

from customer_accounts.services.account_use_cases import (
    AccountCreate,
    AccountUpdate,
    CreateAccount,
    GetAccount,
    ListAccounts,
    UpdateAccount,
    DeleteAccount,
)

__all__ = [
    "AccountCreate",
    "AccountUpdate",
    "CreateAccount",
    "GetAccount",
    "ListAccounts",
    "UpdateAccount",
    "DeleteAccount",
]
