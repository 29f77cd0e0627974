"""Helpers shared by the per-kind routers (service lookup, envelopes, info routes)."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from provisioning.core.config import get_settings
from provisioning.schemas import ContactInfoSchema, ResponseSchema
from provisioning.services.provisioning_service import ProvisioningService

STATUS_200 = "200"
MESSAGE_200 = "Request processed successfully"
STATUS_201 = "201"
STATUS_417 = "417"
MESSAGE_417_UPDATE = "Update operation failed. Please try again or contact Dev team"
MESSAGE_417_DELETE = "Delete operation failed. Please try again or contact Dev team"


def get_service(request: Request, kind: str) -> ProvisioningService:
    services = getattr(getattr(request.app, "state", None), "services", None) or {}
    svc = services.get(kind)
    if not svc:
        raise RuntimeError(f"ProvisioningService for '{kind}' not configured")
    return svc


def envelope(status_code: int, code: str, message: str) -> JSONResponse:
    body = ResponseSchema(status_code=code, status_message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def created(label: str) -> JSONResponse:
    return envelope(status.HTTP_201_CREATED, STATUS_201, f"{label} created successfully")


def outcome(ok: bool, failure_message: str) -> JSONResponse:
    """200 on success, 417 when the service reports nothing was changed."""
    if ok:
        return envelope(status.HTTP_200_OK, STATUS_200, MESSAGE_200)
    return envelope(status.HTTP_417_EXPECTATION_FAILED, STATUS_417, failure_message)


def register_info_routes(router: APIRouter) -> None:
    """Attach build-info and contact-info endpoints to a service router."""

    @router.get("/build-info", response_model=str)
    def build_info() -> str:
        return get_settings().build_version

    @router.get("/contact-info", response_model=ContactInfoSchema, response_model_by_alias=True)
    def contact_info() -> ContactInfoSchema:
        settings = get_settings()
        return ContactInfoSchema(
            message=settings.contact_message,
            contact_details={"name": settings.contact_name, "email": settings.contact_email},
            on_call_support=[item.strip() for item in settings.on_call_support.split(",") if item.strip()],
        )
