from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request

from provisioning.domain.identifiers import MOBILE_PATTERN
from provisioning.domain.kinds import CARDS
from provisioning.schemas import CardSchema, ErrorResponseSchema, ResponseSchema

from .common import MESSAGE_417_DELETE, MESSAGE_417_UPDATE, created, get_service, outcome, register_info_routes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/cards", tags=["cards"])
register_info_routes(router)

_errors = {
    400: {"model": ErrorResponseSchema},
    404: {"model": ErrorResponseSchema},
    500: {"model": ErrorResponseSchema},
}


@router.post("/create", status_code=201, response_model=ResponseSchema, responses=_errors)
def create_card(
    request: Request,
    mobile_number: str = Query(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern),
):
    logger.info("Creating card for mobile number %s", mobile_number)
    get_service(request, CARDS.name).create(mobile_number)
    return created(CARDS.label)


@router.get("/fetch", response_model=CardSchema, response_model_by_alias=True, responses=_errors)
def fetch_card(
    request: Request,
    mobile_number: str = Query(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern),
):
    return get_service(request, CARDS.name).fetch(mobile_number)


@router.put("/update", response_model=ResponseSchema, responses=_errors)
def update_card(request: Request, card: CardSchema):
    logger.info("Updating card for mobile number %s", card.mobile_number)
    ok = get_service(request, CARDS.name).update(card.model_dump())
    return outcome(ok, MESSAGE_417_UPDATE)


@router.delete("/delete", response_model=ResponseSchema, responses=_errors)
def delete_card(
    request: Request,
    mobile_number: str = Query(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern),
):
    logger.info("Deleting card for mobile number %s", mobile_number)
    ok = get_service(request, CARDS.name).delete(mobile_number)
    return outcome(ok, MESSAGE_417_DELETE)
