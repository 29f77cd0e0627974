"""
Provisioning use cases shared by the accounts, cards and loans services.

One ``ProvisioningService`` per resource kind enforces "at most one resource
per mobile number", creates rows with a generated identifier number, and
keeps owner and resource rows consistent on update and delete. Every
operation runs inside a single unit of work, so the two-row writes of the
accounts variant commit or roll back together.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, ContextManager, Mapping, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from provisioning.core.config import get_settings
from provisioning.db.session import unit_of_work
from provisioning.domain.identifiers import generate_identifier
from provisioning.domain.kinds import OWNER_FIELDS, ResourceKind
from provisioning.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)


class ProvisioningError(Exception):
    """Base exception for provisioning workflows."""


class AlreadyExistsError(ProvisioningError):
    """Raised when the mobile number already owns a resource of this kind."""

    def __init__(self, label: str, mobile_number: str):
        super().__init__(f"{label} already registered with given mobileNumber {mobile_number}")
        self.label = label
        self.mobile_number = mobile_number


class NotFoundError(ProvisioningError):
    def __init__(self, entity: str, field: str, value: Any):
        super().__init__(f"{entity} not found with the given input data {field} : '{value}'")
        self.entity = entity
        self.field = field
        self.value = value


class IdentifierExhaustedError(ProvisioningError):
    """Raised when every drawn identifier number was already taken."""

    def __init__(self, label: str, attempts: int):
        super().__init__(f"Could not draw a free {label.lower()} number after {attempts} attempts")
        self.label = label
        self.attempts = attempts


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _apply(entity: Any, values: Mapping[str, Any], fields: tuple[str, ...]) -> None:
    for name in fields:
        if name in values and values[name] is not None:
            setattr(entity, name, values[name])


class ProvisioningService:
    """Create, fetch, update and delete the resource of one kind."""

    def __init__(
        self,
        kind: ResourceKind,
        *,
        session_scope: Callable[[], ContextManager[Session]] = unit_of_work,
        repository_factory: Callable[[Session], SQLRepository] = SQLRepository,
        identifier_max_attempts: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.kind = kind
        self._session_scope = session_scope
        self._repository_factory = repository_factory
        if identifier_max_attempts is None:
            identifier_max_attempts = get_settings().identifier_max_attempts
        self.identifier_max_attempts = max(1, identifier_max_attempts)
        self._rng = rng

    # -------------------------------------- helpers --------------------------------------
    @property
    def _lookup_model(self) -> type:
        """Model whose mobile_number is the natural key for this kind."""
        return self.kind.owner_model if self.kind.owner_linked else self.kind.model

    @property
    def _lookup_label(self) -> str:
        return "Customer" if self.kind.owner_linked else self.kind.label

    def _draw_identifier(self, repo: SQLRepository) -> Any:
        kind = self.kind
        for _ in range(self.identifier_max_attempts):
            candidate = kind.identifier_type(generate_identifier(kind.identifier_digits, self._rng))
            if repo.find_by_identifier(kind.model, kind.identifier_field, candidate) is None:
                return candidate
            logger.warning("%s number %s already taken, drawing again", kind.label, candidate)
        raise IdentifierExhaustedError(kind.label, self.identifier_max_attempts)

    def _new_resource(self, repo: SQLRepository, mobile_number: str, owner: Any | None) -> Any:
        kind = self.kind
        values = dict(kind.defaults)
        values[kind.identifier_field] = self._draw_identifier(repo)
        if kind.owner_linked:
            values[kind.owner_ref_field] = owner.id
        else:
            values["mobile_number"] = mobile_number
        return kind.model(**values)

    def _find_by_mobile(self, repo: SQLRepository, mobile_number: str) -> Any:
        entity = repo.find_by_mobile_number(self._lookup_model, mobile_number)
        if entity is None:
            logger.info("%s lookup failed for mobile number %s", self._lookup_label, mobile_number)
            raise NotFoundError(self._lookup_label, "mobileNumber", mobile_number)
        return entity

    def _resource_view(self, resource: Any) -> dict:
        return {name: getattr(resource, name) for name in self.kind.view_fields}

    def _holder_of(self, model: type, mobile_number: Optional[str]) -> Optional[int]:
        """Id of the committed row owning ``mobile_number``, read in a fresh session."""
        if mobile_number is None:
            return None
        with self._session_scope() as session:
            found = self._repository_factory(session).find_by_mobile_number(model, mobile_number)
            return found.id if found is not None else None

    # -------------------------------------- use cases --------------------------------------
    def create(self, mobile_number: str, owner: Optional[Mapping[str, Any]] = None) -> None:
        """Provision a new resource for ``mobile_number``.

        The accounts kind also needs ``owner`` (name and email) and persists the
        customer row first so the account can reference its id. Raises
        ``AlreadyExistsError`` when a row already exists for the number, including
        when a concurrent create wins the race at the unique constraint. Any
        other store error propagates unchanged.
        """
        kind = self.kind
        if kind.owner_linked and not owner:
            raise ValueError("owner details are required to open an account")
        try:
            with self._session_scope() as session:
                repo = self._repository_factory(session)
                if repo.find_by_mobile_number(self._lookup_model, mobile_number) is not None:
                    logger.info("%s already exists for mobile number %s", kind.label, mobile_number)
                    raise AlreadyExistsError(kind.label, mobile_number)
                customer = None
                if kind.owner_linked:
                    customer = kind.owner_model(
                        name=owner.get("name"),
                        email=owner.get("email"),
                        mobile_number=mobile_number,
                    )
                    repo.save(customer)
                resource = repo.save(self._new_resource(repo, mobile_number, customer))
                logger.info(
                    "Created %s %s for mobile number %s",
                    kind.label.lower(),
                    getattr(resource, kind.identifier_field),
                    mobile_number,
                )
        except IntegrityError as exc:
            # only a concurrent create for the same number is a duplicate
            if self._holder_of(self._lookup_model, mobile_number) is None:
                raise
            logger.warning("Unique constraint rejected %s for mobile number %s", kind.label.lower(), mobile_number)
            raise AlreadyExistsError(kind.label, mobile_number) from exc

    def fetch(self, mobile_number: str) -> dict:
        """Return the resource (and owner, for accounts) as a plain view."""
        kind = self.kind
        with self._session_scope() as session:
            repo = self._repository_factory(session)
            found = self._find_by_mobile(repo, mobile_number)
            if not kind.owner_linked:
                return self._resource_view(found)
            account = repo.find_by_owner(kind.model, kind.owner_ref_field, found.id)
            if account is None:
                raise NotFoundError(kind.label, _camel(kind.owner_ref_field), found.id)
            view = {name: getattr(found, name) for name in OWNER_FIELDS}
            view["account"] = self._resource_view(account)
            return view

    def update(self, view: Mapping[str, Any]) -> bool:
        """Apply the mutable fields of ``view`` to the stored resource.

        Accounts are looked up by account number and update both the account and
        its customer; cards and loans are looked up by mobile number. Identifier
        numbers never change.
        """
        kind = self.kind
        if kind.owner_linked:
            return self._update_account(view)
        key = view.get(kind.update_key)
        with self._session_scope() as session:
            repo = self._repository_factory(session)
            resource = self._find_for_update(repo, key)
            _apply(resource, view, kind.mutable_fields)
            repo.save(resource)
        logger.info("Updated %s with %s %s", kind.label.lower(), _camel(kind.update_key), key)
        return True

    def _find_for_update(self, repo: SQLRepository, key: Any) -> Any:
        kind = self.kind
        resource = None
        if key is not None:
            resource = repo.find_by_identifier(kind.model, kind.update_key, key)
        if resource is None:
            logger.info("%s lookup failed for %s %s", kind.label, _camel(kind.update_key), key)
            raise NotFoundError(kind.label, _camel(kind.update_key), key)
        return resource

    def _update_account(self, view: Mapping[str, Any]) -> bool:
        kind = self.kind
        account_view = view.get("account") or {}
        key = account_view.get(kind.update_key)
        owner_id = None
        try:
            with self._session_scope() as session:
                repo = self._repository_factory(session)
                account = self._find_for_update(repo, key)
                _apply(account, account_view, kind.mutable_fields)
                repo.save(account)

                owner_id = getattr(account, kind.owner_ref_field)
                customer = repo.find_by_id(kind.owner_model, owner_id)
                if customer is None:
                    raise NotFoundError("Customer", _camel(kind.owner_ref_field), owner_id)
                _apply(customer, view, OWNER_FIELDS)
                repo.save(customer)
        except IntegrityError as exc:
            mobile_number = view.get("mobile_number")
            holder = self._holder_of(kind.owner_model, mobile_number)
            if holder is None or holder == owner_id:
                raise
            raise AlreadyExistsError("Customer", mobile_number) from exc
        logger.info("Updated account %s", key)
        return True

    def delete(self, mobile_number: str) -> bool:
        """Remove the resource, and for accounts its customer row as well."""
        kind = self.kind
        with self._session_scope() as session:
            repo = self._repository_factory(session)
            found = self._find_by_mobile(repo, mobile_number)
            if kind.owner_linked:
                repo.delete_all_by_owner(kind.model, kind.owner_ref_field, found.id)
                repo.delete_by_id(kind.owner_model, found.id)
            else:
                repo.delete_by_id(kind.model, found.id)
        logger.info("Deleted %s for mobile number %s", kind.label.lower(), mobile_number)
        return True
