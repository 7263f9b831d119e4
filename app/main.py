"""FastAPI application entrypoint. No business logic; only wiring, middleware and error envelopes."""

from dotenv import load_dotenv

load_dotenv()

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.api import router as api_router
from app.core.config import Settings, get_settings
from app.core.logging import configure_logging
from app.services.auth import ensure_bootstrap_admin
from app.services.sessions import build_session_store
from app.services.storage import build_storage

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    """Every error leaves the API as {"error": message}."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Short '<field>: <reason>' text for the first validation error."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    reason = first.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {reason}" if loc else reason


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, _describe_validation_error(exc))


async def _database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(500, INTERNAL_ERROR_MESSAGE)


class _RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, client, status and latency; turn anything uncaught into a 500 envelope."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = _error(500, INTERNAL_ERROR_MESSAGE)
        elapsed_ms = (time.perf_counter() - start) * 1000

        client_ip = request.client.host if request.client else "unknown"
        logger.info(
            "%s %s | client=%s status=%d latency=%.1fms",
            request.method,
            request.url.path,
            client_ip,
            response.status_code,
            elapsed_ms,
        )
        return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with the storage and session backends named in settings."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            ensure_bootstrap_admin(
                app.state.storage,
                settings.BOOTSTRAP_ADMIN_USERNAME,
                settings.BOOTSTRAP_ADMIN_PASSWORD.get_secret_value(),
            )
        except Exception:
            # The API still serves public content without an admin account.
            logger.exception("Could not create bootstrap admin user")
        logger.info(
            "Landing API starting up (env=%s storage=%s sessions=%s)",
            settings.APP_ENV,
            settings.STORAGE_BACKEND,
            settings.SESSION_BACKEND,
        )
        yield
        logger.info("Landing API shutting down")

    app = FastAPI(
        title="Landing Page API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = build_storage(settings)
    app.state.session_store = build_session_store(settings)

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _database_exception_handler)

    app.add_middleware(_RequestLogMiddleware)
    # Added last so it wraps everything, including 500 envelopes.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
