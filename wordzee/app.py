from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from wordzee import __version__
from wordzee.core.config import Settings, get_settings
from wordzee.core.logging_setup import setup_logging
from wordzee.core.responses import error_response
from wordzee.core.security import API_KEY_HEADER
from wordzee.db.create_tables import create_all
from wordzee.routers import health as health_router
from wordzee.routers import words as words_router
from wordzee.services.word_service import WordService

logger = logging.getLogger(__name__)

DEV_ORIGINS = (
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti sniffing, clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _allowed_origins(settings: Settings) -> list[str]:
    allowed = set(settings.allowed_origins)
    if settings.app_env != "prod":
        allowed.update(DEV_ORIGINS)
    return sorted(origin for origin in allowed if origin)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        response = error_response(str(exc.detail), exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return error_response("Invalid request", 400)


def create_app(word_service: Optional[WordService] = None, *, create_tables: Optional[bool] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    setup_logging(settings)
    if create_tables is None:
        create_tables = word_service is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if create_tables:
            create_all()
            logger.info("Word store schema ready")
        yield

    app = FastAPI(title="Wordzee API", version=__version__, lifespan=lifespan)
    app.state.word_service = word_service or WordService()

    origins = _allowed_origins(settings)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=[API_KEY_HEADER, "Content-Type", "Accept", "Origin"],
            max_age=3600,
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    _install_error_handlers(app)

    @app.get("/", include_in_schema=False)
    @app.get("/docs-redirect", include_in_schema=False)
    def docs_redirect():
        return RedirectResponse(words_router.DOCS_URL, status_code=302)

    app.include_router(words_router.router)
    app.include_router(health_router.router)
    return app


app = create_app()
