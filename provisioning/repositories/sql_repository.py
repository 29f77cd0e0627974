"""Data access helpers backed by SQLAlchemy, generic over the model class."""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import select, delete
from sqlalchemy.orm import Session


class SQLRepository:
    """CRUD helpers bound to the session of the current unit of work.

    Every method takes the model class it operates on, so one repository
    serves customers, accounts, cards and loans alike. Nothing here commits:
    the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    # -------------------------- lookups --------------------------
    def find_by_mobile_number(self, model: type, mobile_number: str) -> Optional[Any]:
        stmt = select(model).where(model.mobile_number == mobile_number)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_id(self, model: type, pk: int) -> Optional[Any]:
        return self.session.get(model, pk)

    def find_by_identifier(self, model: type, field: str, value: Any) -> Optional[Any]:
        stmt = select(model).where(getattr(model, field) == value)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_owner(self, model: type, owner_field: str, owner_id: int) -> Optional[Any]:
        stmt = select(model).where(getattr(model, owner_field) == owner_id).limit(1)
        return self.session.execute(stmt).scalars().first()

    # -------------------------- writes --------------------------
    def save(self, entity: Any) -> Any:
        """Add or update ``entity`` and flush so the store assigns its key."""
        self.session.add(entity)
        self.session.flush()
        return entity

    def delete_by_id(self, model: type, pk: int) -> None:
        self.session.execute(delete(model).where(model.id == pk))

    def delete_all_by_owner(self, model: type, owner_field: str, owner_id: int) -> None:
        self.session.execute(delete(model).where(getattr(model, owner_field) == owner_id))
