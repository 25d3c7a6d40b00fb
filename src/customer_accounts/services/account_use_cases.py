"""Customer account use cases.

Each use case takes the persistence port through its constructor and exposes
a single ``execute`` method. Domain errors propagate to the caller unchanged.
"""

import logging
import uuid
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Callable, Optional

from customer_accounts.core.exceptions import DuplicateEmailError, NotFoundError
from customer_accounts.core.timezone import now_utc
from customer_accounts.domain.models import Account, merge
from customer_accounts.domain.validation import validate_create, validate_update
from customer_accounts.repositories.protocols import AccountRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass
class AccountCreate:
    """Input data for creating an account."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


@dataclass
class AccountUpdate:
    """Sparse update data. None means "leave unchanged"."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None

    def supplied(self) -> dict[str, str]:
        """Return only the fields that were provided."""
        return {k: v for k, v in asdict(self).items() if v is not None}


class CreateAccount:
    """Validate input, reject duplicate emails and persist a new account."""

    def __init__(self, account_repo: AccountRepository, clock: Clock = now_utc):
        self._account_repo = account_repo
        self._clock = clock

    def execute(self, data: AccountCreate) -> Account:
        """
        Create a new customer account.

        Raises:
            InvalidInputError: a required field is missing or a field is malformed
            DuplicateEmailError: another account already uses the email
        """
        validate_create(asdict(data))

        if self._account_repo.get_by_email(data.email) is not None:
            logger.warning("Rejected account creation: email %s already in use", data.email)
            raise DuplicateEmailError(data.email)

        account = Account(
            account_id=str(uuid.uuid4()),
            created_at=self._clock(),
            **asdict(data),
        )
        created = self._account_repo.create(account)
        logger.info("Created account %s", created.account_id)
        return created


class GetAccount:
    """Fetch a single account by ID."""

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def execute(self, account_id: str) -> Account:
        account = self._account_repo.get_by_id(account_id)
        if account is None:
            raise NotFoundError(account_id)
        return account


class ListAccounts:
    """List every account, newest first."""

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def execute(self) -> list[Account]:
        return self._account_repo.list_all()


class UpdateAccount:
    """Apply a sparse update to an existing account."""

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def execute(self, account_id: str, patch: AccountUpdate) -> Account:
        """
        Update an existing account.

        Fields absent from ``patch`` keep their stored values. Nothing is
        written unless validation and the uniqueness check both pass.

        Raises:
            NotFoundError: no account has this ID
            InvalidInputError: a supplied field is empty or malformed
            DuplicateEmailError: the new email belongs to another account
        """
        existing = self._account_repo.get_by_id(account_id)
        if existing is None:
            raise NotFoundError(account_id)

        overrides = patch.supplied()
        validate_update(overrides)

        merged = merge(existing, overrides)
        if merged.email != existing.email:
            owner = self._account_repo.get_by_email(merged.email)
            if owner is not None and owner.account_id != account_id:
                logger.warning(
                    "Rejected update of account %s: email %s already in use",
                    account_id,
                    merged.email,
                )
                raise DuplicateEmailError(merged.email)

        updated = self._account_repo.update(account_id, merged)
        logger.info("Updated account %s (%s)", account_id, ", ".join(sorted(overrides)))
        return updated


class DeleteAccount:
    """Hard-delete an account. Deleting an unknown ID is an error."""

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def execute(self, account_id: str) -> None:
        if self._account_repo.get_by_id(account_id) is None:
            raise NotFoundError(account_id)
        self._account_repo.delete(account_id)
        logger.info("Deleted account %s", account_id)
