# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Event Registration API
======================
Registers attendees, tracks per-session attendance, sends confirmation,
contact and broadcast email, creates payment checkout sessions and serves
the bundled front-end.

Port: 5000 (``PORT``)
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from registration_api.controllers import (
    attendance_controller,
    broadcast_controller,
    checkout_controller,
    contact_controller,
    frontend_controller,
    registration_controller,
    system_controller,
)
from registration_api.core.config import settings
from registration_api.core.dependencies import get_attendee_repo
from registration_api.core.exceptions import ServiceError
from registration_api.core.logging import get_logger
from registration_api.middleware import MetricsMiddleware, RequestIDMiddleware
from registration_api.schemas import MessageResponse

logger = get_logger(__name__)


def describe_validation_errors(errors) -> str:
    """One human-readable line, e.g. ``"Invalid email: email must contain '@'"``."""
    if not errors:
        return "Invalid request."
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path"))
    message = str(first.get("msg", "invalid value")).removeprefix("Value error, ")
    return f"Invalid {field}: {message}" if field else f"Invalid request: {message}"


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Ensure the schema exists at startup; dispose the pool on shutdown."""
    repo = get_attendee_repo()
    try:
        repo.init_schema()
        logger.info("Database connection verified — %d attendees", repo.count_all())
    except Exception as exc:
        logger.error("Database unavailable at startup: %s", exc)
    yield
    logger.info("Registration API shutting down")
    repo.dispose()


def create_app() -> FastAPI:
    application = FastAPI(
        title="Event Registration API",
        description="Attendee registration, attendance, email and checkout endpoints.",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
        responses={500: {"model": MessageResponse, "description": "Internal server error"}},
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(MetricsMiddleware)
    application.add_middleware(RequestIDMiddleware)

    @application.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"message": describe_validation_errors(exc.errors())})

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logger.exception("Unhandled exception", extra={"request_id": req_id})
        return JSONResponse(
            status_code=500,
            content={"message": "Server error. Please try again.", "request_id": req_id},
        )

    application.include_router(system_controller.router)
    application.include_router(registration_controller.router)
    application.include_router(attendance_controller.router)
    application.include_router(contact_controller.router)
    application.include_router(broadcast_controller.router)
    application.include_router(checkout_controller.router)
    # Catch-all; must stay last.
    application.include_router(frontend_controller.router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level="info")
