"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, String, DateTime, Index

from customer_accounts.repositories.sqlalchemy.database import Base


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "customer_accounts"
    __table_args__ = (
        Index("ix_customer_accounts_email", "email", unique=True),
    )

    account_id = Column(String(36), primary_key=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(20), nullable=True)
    address = Column(String(500), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
