"""FastAPI application entrypoint.

Run with ``uvicorn movie_api.main:create_app --factory``; settings are read
once when the app is created.
"""

from __future__ import annotations

import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from movie_api.core.config import get_settings
from movie_api.core.logging_safety import configure_access_log, safe_log_identifier
from movie_api.errors import ApiError, StoreUnavailableError
from movie_api.repositories.memory import InMemoryStore
from movie_api.repositories.seed import seed_movies
from movie_api.routes import auth_router, movies_router, users_router
from movie_api.routes.dependencies import get_request_correlation_id
from movie_api.schemas.error import ErrorResponse

WELCOME_MESSAGE = "Welcome to my movie API!"
_HTTP_ERROR_CODES = {404: "RESOURCE_NOT_FOUND", 405: "METHOD_NOT_ALLOWED"}
logger = logging.getLogger(__name__)


def _validation_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
            "type": str(error.get("type", "")),
        }
        for error in exc.errors()
    ]


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Movie API", version="1.0.0")
    app.state.store = InMemoryStore()
    if settings.seed_movies:
        added = seed_movies(app.state.store)
        logger.info("store.seeded movies=%s", added)

    access_logger = configure_access_log(settings.access_log_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_access(request: Request, call_next):
        started = time.perf_counter()
        correlation_id = get_request_correlation_id(request)
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            access_logger.info(
                "access correlation_id=%s method=%s path=%s status=%s duration_ms=%.1f",
                safe_log_identifier(correlation_id, prefix="cid"),
                request.method,
                request.url.path,
                status_code,
                (time.perf_counter() - started) * 1000,
            )

    @app.exception_handler(ApiError)
    async def handle_api_error(_, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.payload.model_dump(mode="json", exclude_none=True),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_, exc: StarletteHTTPException) -> JSONResponse:
        # Unmatched paths and methods, including those that fall through to the static mount.
        payload = ErrorResponse(
            code=_HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            message=exc.detail if isinstance(exc.detail, str) else "Request failed",
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=payload.model_dump(exclude_none=True),
            headers=exc.headers,
        )

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(request: Request, exc: StoreUnavailableError) -> JSONResponse:
        logger.error(
            "store.unavailable method=%s path=%s error=%s",
            request.method,
            request.url.path,
            exc,
        )
        payload = ErrorResponse(code="STORE_UNAVAILABLE", message="Service temporarily unavailable")
        return JSONResponse(status_code=503, content=payload.model_dump(exclude_none=True))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_, exc: RequestValidationError) -> JSONResponse:
        payload = ErrorResponse(
            code="VALIDATION_ERROR",
            message="Invalid request payload",
            details={"errors": _validation_errors(exc)},
        )
        return JSONResponse(status_code=422, content=payload.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("request.failed method=%s path=%s", request.method, request.url.path)
        payload = ErrorResponse(code="INTERNAL_ERROR", message="Something went wrong!")
        return JSONResponse(status_code=500, content=payload.model_dump(exclude_none=True))

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def welcome() -> str:
        return WELCOME_MESSAGE

    app.include_router(auth_router)
    app.include_router(movies_router)
    app.include_router(users_router)

    if settings.public_dir and os.path.isdir(settings.public_dir):
        app.mount("/", StaticFiles(directory=settings.public_dir), name="public")

    return app
