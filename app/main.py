"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager
from uuid import uuid4

# Configure logging to output to stdout
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth.tokens import TokenService
from app.config import Settings, get_settings
from app.routers import auth, health, products
from app.schemas.common import ErrorResponse, FieldError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration once the server is up."""
    settings: Settings = app.state.settings
    logger.info(
        "Product catalog API ready (CORS origin %s, token lifetime %d days)",
        settings.frontend_url,
        settings.jwt_expires_days,
    )
    yield
    logger.info("Product catalog API shutting down")


def _error_response(
    status_code: int,
    detail: str,
    error_type: str,
    error_id: str,
    errors: list[FieldError] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content = ErrorResponse(
        detail=detail,
        error_type=error_type,
        error_id=error_id,
        errors=errors,
    ).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with consistent format."""
    error_id = str(uuid4())

    # Determine error type
    if exc.status_code == 404:
        error_type = "not_found"
    elif exc.status_code == 400:
        error_type = "validation"
    elif exc.status_code == 401 or exc.status_code == 403:
        error_type = "auth"
    else:
        error_type = "server_error"

    logger.warning(
        f"HTTP {exc.status_code} [{error_id}]: {exc.detail} - {request.method} {request.url.path}"
    )

    return _error_response(
        exc.status_code,
        str(exc.detail),
        error_type,
        error_id,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors with field details (400)."""
    error_id = str(uuid4())

    # Format validation errors
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        errors.append(FieldError(field=field, message=error["msg"]))

    logger.warning(
        f"Validation error [{error_id}]: {[e.model_dump() for e in errors]} - "
        f"{request.method} {request.url.path}"
    )

    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation error",
        "validation",
        error_id,
        errors=errors,
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Store failures become a 500 without leaking driver details."""
    error_id = str(uuid4())

    logger.error(
        f"Database error [{error_id}]: {type(exc).__name__}: {exc} - "
        f"{request.method} {request.url.path}",
        exc_info=exc,
    )

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        "server_error",
        error_id,
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unhandled exceptions."""
    error_id = str(uuid4())

    logger.error(
        f"Unhandled exception [{error_id}]: {type(exc).__name__}: {exc} - "
        f"{request.method} {request.url.path}",
        exc_info=exc,
    )

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        "server_error",
        error_id,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Raises ConfigurationError when JWT_SECRET is missing, so the process
    never starts without a signing secret.
    """
    settings = settings or get_settings()
    token_service = TokenService.from_settings(settings)

    app = FastAPI(
        title="Product Catalog API",
        description="Product catalog with user registration and token auth",
        version="0.1.0",
        redirect_slashes=False,  # Prevent 307 redirects that break HTTPS through proxies
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.token_service = token_service

    # CORS for the catalog frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(products.router)

    # Global exception handlers
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
