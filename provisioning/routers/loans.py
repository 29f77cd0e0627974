from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request

from provisioning.domain.identifiers import MOBILE_PATTERN
from provisioning.domain.kinds import LOANS
from provisioning.schemas import ErrorResponseSchema, LoanSchema, ResponseSchema

from .common import MESSAGE_417_DELETE, MESSAGE_417_UPDATE, created, get_service, outcome, register_info_routes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])
register_info_routes(router)

_errors = {
    400: {"model": ErrorResponseSchema},
    404: {"model": ErrorResponseSchema},
    500: {"model": ErrorResponseSchema},
}


@router.post("/create", status_code=201, response_model=ResponseSchema, responses=_errors)
def create_loan(
    request: Request,
    mobile_number: str = Query(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern),
):
    logger.info("Creating loan for mobile number %s", mobile_number)
    get_service(request, LOANS.name).create(mobile_number)
    return created(LOANS.label)


@router.get("/fetch", response_model=LoanSchema, response_model_by_alias=True, responses=_errors)
def fetch_loan(
    request: Request,
    mobile_number: str = Query(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern),
):
    logger.info("Fetching loan details for mobile number %s", mobile_number)
    return get_service(request, LOANS.name).fetch(mobile_number)


@router.put("/update", response_model=ResponseSchema, responses=_errors)
def update_loan(request: Request, loan: LoanSchema):
    logger.info("Updating loan details for mobile number %s", loan.mobile_number)
    ok = get_service(request, LOANS.name).update(loan.model_dump())
    return outcome(ok, MESSAGE_417_UPDATE)


@router.delete("/delete", response_model=ResponseSchema, responses=_errors)
def delete_loan(
    request: Request,
    mobile_number: str = Query(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern),
):
    logger.info("Deleting loan for mobile number %s", mobile_number)
    ok = get_service(request, LOANS.name).delete(mobile_number)
    return outcome(ok, MESSAGE_417_DELETE)
