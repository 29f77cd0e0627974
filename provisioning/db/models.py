"""SQLAlchemy models for owners (customers) and provisioned resources."""
from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    func,
)

from provisioning.core.config import get_settings

from .session import Base


def current_actor() -> str:
    return get_settings().audit_actor


class AuditMixin:
    """created_* are written on insert only, updated_* on update only."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    created_by = Column(String(32), default=current_actor, nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)
    updated_by = Column(String(32), onupdate=current_actor, nullable=True)


class Customer(AuditMixin, Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    mobile_number = Column(String(20), unique=True, nullable=False)


class Account(AuditMixin, Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), unique=True, nullable=False)
    account_number = Column(BigInteger, unique=True, nullable=False)
    account_type = Column(String(100), nullable=False)
    branch_address = Column(String(200), nullable=False)


class Card(AuditMixin, Base):
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    mobile_number = Column(String(20), unique=True, nullable=False)
    card_number = Column(String(20), unique=True, nullable=False)
    card_type = Column(String(100), nullable=False)
    total_limit = Column(Integer, nullable=False)
    amount_used = Column(Integer, nullable=False)
    available_amount = Column(Integer, nullable=False)


class Loan(AuditMixin, Base):
    __tablename__ = "loans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    mobile_number = Column(String(20), unique=True, nullable=False)
    loan_number = Column(String(20), unique=True, nullable=False)
    loan_type = Column(String(100), nullable=False)
    total_loan = Column(Integer, nullable=False)
    amount_paid = Column(Integer, nullable=False)
    outstanding_amount = Column(Integer, nullable=False)
