from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request

from provisioning.domain.identifiers import MOBILE_PATTERN
from provisioning.domain.kinds import ACCOUNTS
from provisioning.schemas import CustomerSchema, ErrorResponseSchema, ResponseSchema

from .common import MESSAGE_417_DELETE, MESSAGE_417_UPDATE, created, get_service, outcome, register_info_routes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/accounts", tags=["accounts"])
register_info_routes(router)

_errors = {
    400: {"model": ErrorResponseSchema},
    404: {"model": ErrorResponseSchema},
    500: {"model": ErrorResponseSchema},
}


@router.post("/create", status_code=201, response_model=ResponseSchema, responses=_errors)
def create_account(request: Request, customer: CustomerSchema):
    """Create a customer and open its savings account."""
    logger.info("Creating account for mobile number %s", customer.mobile_number)
    get_service(request, ACCOUNTS.name).create(
        customer.mobile_number,
        {"name": customer.name, "email": customer.email},
    )
    return created(ACCOUNTS.label)


@router.get("/fetch", response_model=CustomerSchema, response_model_by_alias=True, responses=_errors)
def fetch_account(
    request: Request,
    mobile_number: str = Query(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern),
):
    return get_service(request, ACCOUNTS.name).fetch(mobile_number)


@router.put("/update", response_model=ResponseSchema, responses=_errors)
def update_account(request: Request, customer: CustomerSchema):
    """Update account type/branch and the customer's details, keyed by account number."""
    view = customer.model_dump()
    logger.info("Updating account for mobile number %s", customer.mobile_number)
    ok = get_service(request, ACCOUNTS.name).update(view)
    return outcome(ok, MESSAGE_417_UPDATE)


@router.delete("/delete", response_model=ResponseSchema, responses=_errors)
def delete_account(
    request: Request,
    mobile_number: str = Query(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern),
):
    logger.info("Deleting account for mobile number %s", mobile_number)
    ok = get_service(request, ACCOUNTS.name).delete(mobile_number)
    return outcome(ok, MESSAGE_417_DELETE)
