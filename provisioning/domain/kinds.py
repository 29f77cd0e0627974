"""
Descriptors for the three provisioned resource kinds.

A ``ResourceKind`` captures everything that differs between the accounts,
cards and loans services: the model, the generated identifier, the defaults
of a freshly provisioned row, which fields an update may touch, and whether
the resource hangs off a separate owner (customer) row.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from provisioning.db.models import Account, Card, Customer, Loan

OWNER_FIELDS = ("name", "email", "mobile_number")


@dataclass(frozen=True)
class ResourceKind:
    name: str
    label: str
    model: type
    identifier_field: str
    identifier_digits: int
    identifier_type: Callable[[int], Any]
    update_key: str
    mutable_fields: tuple[str, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    owner_model: type | None = None
    owner_ref_field: str | None = None

    @property
    def owner_linked(self) -> bool:
        return self.owner_model is not None

    @property
    def view_fields(self) -> tuple[str, ...]:
        if self.owner_linked:
            return (self.identifier_field,) + self.mutable_fields
        return ("mobile_number", self.identifier_field) + self.mutable_fields


ACCOUNTS = ResourceKind(
    name="accounts",
    label="Account",
    model=Account,
    identifier_field="account_number",
    identifier_digits=9,
    identifier_type=int,
    update_key="account_number",
    mutable_fields=("account_type", "branch_address"),
    defaults={
        "account_type": "Savings",
        "branch_address": "123 Main Street, New York",
    },
    owner_model=Customer,
    owner_ref_field="customer_id",
)

NEW_CARD_LIMIT = 100_000

CARDS = ResourceKind(
    name="cards",
    label="Card",
    model=Card,
    identifier_field="card_number",
    identifier_digits=12,
    identifier_type=str,
    update_key="mobile_number",
    mutable_fields=("card_type", "total_limit", "amount_used", "available_amount"),
    defaults={
        "card_type": "Credit Card",
        "total_limit": NEW_CARD_LIMIT,
        "amount_used": 0,
        "available_amount": NEW_CARD_LIMIT,
    },
)

NEW_LOAN_LIMIT = 100_000

LOANS = ResourceKind(
    name="loans",
    label="Loan",
    model=Loan,
    identifier_field="loan_number",
    identifier_digits=13,
    identifier_type=str,
    update_key="mobile_number",
    mutable_fields=("loan_type", "total_loan", "amount_paid", "outstanding_amount"),
    defaults={
        "loan_type": "Home Loan",
        "total_loan": NEW_LOAN_LIMIT,
        "amount_paid": 0,
        "outstanding_amount": 80_000,
    },
)

KINDS = {kind.name: kind for kind in (ACCOUNTS, CARDS, LOANS)}


def get_kind(name: str) -> ResourceKind:
    try:
        return KINDS[(name or "").strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown resource kind '{name}'") from None
