"""FastAPI application factory for the accounts, cards and loans services."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from provisioning.core.config import get_settings
from provisioning.core.logging_config import setup_logging
from provisioning.db.create_tables import create_all
from provisioning.domain.kinds import get_kind
from provisioning.routers import accounts as accounts_router
from provisioning.routers import cards as cards_router
from provisioning.routers import loans as loans_router
from provisioning.schemas import ErrorResponseSchema
from provisioning.services.provisioning_service import (
    AlreadyExistsError,
    NotFoundError,
    ProvisioningService,
)

logger = logging.getLogger(__name__)

ROUTERS = {
    "accounts": accounts_router.router,
    "cards": cards_router.router,
    "loans": loans_router.router,
}


def _error(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponseSchema(
        api_path=f"uri={request.url.path}",
        error_code=code,
        error_message=message,
        error_time=datetime.now(),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", by_alias=True))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query")]
        errors[".".join(loc) or "request"] = err.get("msg", "invalid value")
    logger.warning("Validation failed on %s: %s", request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


async def handle_already_exists(request: Request, exc: AlreadyExistsError) -> JSONResponse:
    logger.error("AlreadyExistsError: %s", exc)
    return _error(request, status.HTTP_400_BAD_REQUEST, "ALREADY_EXISTS", str(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.error("NotFoundError: %s", exc)
    return _error(request, status.HTTP_404_NOT_FOUND, "RESOURCE_NOT_FOUND", str(exc))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return _error(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR", str(exc))


@asynccontextmanager
async def _lifespan(app: FastAPI):
    if get_settings().auto_create_schema:
        create_all()
    yield


def create_app() -> FastAPI:
    """Build the app with one provisioning service per enabled kind.

    Served by uvicorn as a factory, either ``python -m provisioning`` or::

        uvicorn provisioning.app:create_app --factory --port 8080
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title="Provisioning Services API",
        version=settings.build_version,
        description="CRUD APIs to create, fetch, update and delete accounts, cards and loans",
        lifespan=_lifespan,
    )
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(AlreadyExistsError, handle_already_exists)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(Exception, handle_unexpected)

    app.state.services = {}
    for name in settings.enabled_services:
        app.state.services[name] = ProvisioningService(get_kind(name))
        app.include_router(ROUTERS[name])
    logger.info("Provisioning services enabled: %s", ", ".join(settings.enabled_services))
    return app
