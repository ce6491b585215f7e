"""Notification Manager: Main FastAPI Application.

Applications register events, events register notification types
(templates with {{placeholder}} tags), and messages are composed by filling
a notification type's template with caller-supplied metadata.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_router
from .core import close_db, get_settings, init_db
from .schemas import ErrorDetail, ErrorResponse
from .services import (
    IntegrityError,
    NotFoundError,
    NotificationError,
    StoreError,
    ValidationError,
)

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    configure_logging()
    logger.info(f"Starting {settings.app_name} v{settings.app_version} ({settings.environment})")

    # Startup - production schemas are managed by migrations
    if settings.environment != "production":
        await init_db()
    yield
    # Shutdown
    await close_db()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## Notification Manager API

    Manage the Application → Event → Notification Type hierarchy and compose
    messages from notification templates.

    - **Soft delete**: deleting an entity never removes rows; it marks it
      deleted and cascades to its children.
    - **Activation**: new entities start inactive. Messages can only be
      composed when the whole ownership chain is active.
    - **Templates**: `{{tag}}` placeholders in a template body become the
      notification type's required metadata keys.
    """,
    openapi_url=f"{settings.api_prefix}/openapi.json",
    docs_url=f"{settings.api_prefix}/docs",
    redoc_url=f"{settings.api_prefix}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================


def _error(status_code: int, error: str, message: str, field: str | None = None) -> JSONResponse:
    details = [ErrorDetail(field=field, message=message, code=error)] if field else []
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message, details=details).model_dump(),
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _error(status.HTTP_400_BAD_REQUEST, "validation_error", exc.message, exc.field)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _error(status.HTTP_404_NOT_FOUND, "not_found", exc.message)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    if exc.constraint_violation:
        return _error(status.HTTP_400_BAD_REQUEST, "constraint_violation", exc.detail or exc.message)
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc.detail}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "store_error", exc.message)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.error(f"Data integrity failure on {request.method} {request.url.path}: {exc.message}")
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "Something failed.",
    )


@app.exception_handler(NotificationError)
async def notification_error_handler(request: Request, exc: NotificationError):
    logger.error(f"Unhandled service error: {exc.message}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Something failed.")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    message = "Something failed."
    if settings.debug:
        message = f"An unexpected error occurred: {str(exc)[:200]}"
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", message)


# Health check endpoint
@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.app_version}


# Include API routes
app.include_router(api_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "notification_manager.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
