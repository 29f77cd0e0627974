"""
Smoke tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

from sqlalchemy import inspect

from provisioning.db import create_tables
from provisioning.db.models import Account, Card, Customer
from provisioning.db.session import get_engine, get_session, unit_of_work
from provisioning.repositories.sql_repository import SQLRepository


def _card(mobile: str, number: str) -> Card:
    return Card(
        mobile_number=mobile,
        card_number=number,
        card_type="Credit Card",
        total_limit=100000,
        amount_used=0,
        available_amount=100000,
    )


def test_save_assigns_key_and_lookups_find_row(temp_db):
    with unit_of_work() as session:
        repo = SQLRepository(session)
        card = repo.save(_card("9848149507", "100000000001"))
        assert card.id is not None
        card_id = card.id

    with get_session() as session:
        repo = SQLRepository(session)
        assert repo.find_by_mobile_number(Card, "9848149507").id == card_id
        assert repo.find_by_id(Card, card_id).card_number == "100000000001"
        assert repo.find_by_identifier(Card, "card_number", "100000000001").id == card_id
        assert repo.find_by_mobile_number(Card, "9000000000") is None


def test_delete_by_id_and_by_owner(temp_db):
    with unit_of_work() as session:
        repo = SQLRepository(session)
        customer = repo.save(Customer(name="Jane Roe", email="jane@example.com", mobile_number="9123456789"))
        repo.save(
            Account(
                customer_id=customer.id,
                account_number=123456789,
                account_type="Savings",
                branch_address="123 Main Street, New York",
            )
        )
        customer_id = customer.id

    with unit_of_work() as session:
        repo = SQLRepository(session)
        assert repo.find_by_owner(Account, "customer_id", customer_id) is not None
        repo.delete_all_by_owner(Account, "customer_id", customer_id)
        repo.delete_by_id(Customer, customer_id)

    with get_session() as session:
        repo = SQLRepository(session)
        assert repo.find_by_owner(Account, "customer_id", customer_id) is None
        assert repo.find_by_id(Customer, customer_id) is None


def test_unit_of_work_rolls_back_on_error(temp_db):
    try:
        with unit_of_work() as session:
            SQLRepository(session).save(_card("9848149507", "100000000001"))
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    with get_session() as session:
        assert SQLRepository(session).find_by_mobile_number(Card, "9848149507") is None


def test_audit_columns_follow_insert_and_update(temp_db, monkeypatch):
    with unit_of_work() as session:
        card = SQLRepository(session).save(_card("9848149507", "100000000001"))
        card_id = card.id

    with get_session() as session:
        card = session.get(Card, card_id)
        assert card.created_by == "PROVISIONING_MS"
        assert card.created_at is not None
        assert card.updated_at is None
        assert card.updated_by is None

    with unit_of_work() as session:
        repo = SQLRepository(session)
        card = repo.find_by_id(Card, card_id)
        card.amount_used = 500
        repo.save(card)

    with get_session() as session:
        card = session.get(Card, card_id)
        assert card.updated_by == "PROVISIONING_MS"
        assert card.updated_at is not None


def test_schema_script_recreates_empty_tables(temp_db, capsys):
    with unit_of_work() as session:
        SQLRepository(session).save(_card("9848149507", "100000000001"))

    create_tables.main(["--drop"])

    assert "ready" in capsys.readouterr().out
    assert set(inspect(get_engine()).get_table_names()) >= {"customers", "accounts", "cards", "loans"}
    with get_session() as session:
        assert SQLRepository(session).find_by_mobile_number(Card, "9848149507") is None
