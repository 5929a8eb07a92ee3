"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookmarks_api.api import auth, bookmarks, users
from bookmarks_api.config import get_settings
from bookmarks_api.logging_config import setup_logging
from bookmarks_api.schemas.errors import ErrorResponse
from bookmarks_api.services.exceptions import (
    AccessDeniedError,
    ConflictError,
    CredentialsError,
    NotFoundError,
    ServiceError,
    UnauthenticatedError,
    ValidationError,
)

settings = get_settings()

logger = logging.getLogger(__name__)

# Status code for every service error; subclasses not listed fall back to 400
ERROR_STATUS_CODES: dict[type[ServiceError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    CredentialsError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    setup_logging(settings.log_level)
    logger.info(f"Starting bookmarks API ({settings.environment})")
    yield


app = FastAPI(
    title="Bookmarks API",
    description="Personal bookmark manager with per-user access control",
    version="0.1.0",
    lifespan=lifespan,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    },
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(ServiceError)
async def service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    """Translate service-layer errors into JSON error responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthenticatedError) else None

    body = ErrorResponse(detail=exc.message)
    if isinstance(exc, ValidationError):
        body.errors = exc.errors
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 with field-level detail."""
    error = ValidationError("Invalid request", errors=jsonable_encoder(exc.errors()))
    return await service_error_handler(request, error)


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(bookmarks.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
