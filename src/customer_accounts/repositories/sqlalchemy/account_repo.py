"""SQLAlchemy implementation of AccountRepository."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from customer_accounts.core.exceptions import DuplicateEmailError, NotFoundError
from customer_accounts.core.timezone import now_utc, to_utc
from customer_accounts.domain.models import Account, MUTABLE_FIELDS
from customer_accounts.repositories.sqlalchemy.orm_models import AccountORM

logger = logging.getLogger(__name__)


class SqlAlchemyAccountRepository:
    """SQLAlchemy-backed account repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        orm_account = AccountORM(
            account_id=account.account_id,
            created_at=to_utc(account.created_at) if account.created_at else now_utc(),
            **{name: getattr(account, name) for name in MUTABLE_FIELDS},
        )
        self._db.add(orm_account)
        self._commit(account)
        self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account by ID."""
        orm_account = self._get_orm(account_id)
        return self._to_domain(orm_account) if orm_account else None

    def get_by_email(self, email: str) -> Optional[Account]:
        """Retrieve account by email."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.email == email
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def list_all(self) -> list[Account]:
        """List all accounts, newest first."""
        orm_accounts = self._db.query(AccountORM).order_by(
            AccountORM.created_at.desc()
        ).all()
        return [self._to_domain(a) for a in orm_accounts]

    def update(self, account_id: str, account: Account) -> Account:
        """Update an existing account."""
        orm_account = self._get_orm(account_id)
        if orm_account is None:
            raise NotFoundError(account_id)
        for name in MUTABLE_FIELDS:
            setattr(orm_account, name, getattr(account, name))
        self._commit(account)
        self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def delete(self, account_id: str) -> None:
        """Delete an account."""
        orm_account = self._get_orm(account_id)
        if orm_account is None:
            raise NotFoundError(account_id)
        self._db.delete(orm_account)
        self._db.commit()

    def _get_orm(self, account_id: str) -> Optional[AccountORM]:
        return self._db.query(AccountORM).filter(
            AccountORM.account_id == account_id
        ).first()

    def _commit(self, account: Account) -> None:
        """Commit, translating an email unique-constraint violation.

        After the rollback the email is looked up again: if another account
        now owns it, the write lost a uniqueness race.
        """
        try:
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            owner = self._db.query(AccountORM.account_id).filter(
                AccountORM.email == account.email
            ).scalar()
            if owner is not None and owner != account.account_id:
                logger.warning("Storage rejected duplicate email %s", account.email)
                raise DuplicateEmailError(account.email) from e
            raise

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            account_id=orm.account_id,
            first_name=orm.first_name,
            last_name=orm.last_name,
            email=orm.email,
            phone_number=orm.phone_number,
            address=orm.address,
            city=orm.city,
            state=orm.state,
            country=orm.country,
            created_at=to_utc(orm.created_at) if orm.created_at else None,
        )
