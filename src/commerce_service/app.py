from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import redis.asyncio as aioredis
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from commerce_service.api.middleware.correlation_id import CorrelationIdMiddleware
from commerce_service.api.middleware.access_log import AccessLogMiddleware
from commerce_service.api.v1.routers import (
    comments,
    health,
    native_products,
    orders,
    packages,
    posts,
    products,
)
from commerce_service.api.v1.schemas.common import ERROR_RESPONSES
from commerce_service.application.exceptions import (
    AppError,
    ConflictError,
    ErrorCode,
    ForbiddenError,
    NotFoundError,
    NotImplementedAppError,
    UnauthorizedError,
    ValidationError,
    service_error,
)
from commerce_service.config import Settings, get_settings
from commerce_service.infrastructure.auth.hs256_verifier import HS256Verifier
from commerce_service.infrastructure.cache.redis_cache import RedisCache
from commerce_service.infrastructure.db.session import build_engine, build_session_factory
from commerce_service.logging_config import configure_logging

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[AppError], int] = {
    ValidationError: 400,
    UnauthorizedError: 401,
    ForbiddenError: 403,
    NotFoundError: 404,
    ConflictError: 409,
    NotImplementedAppError: 501,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown lifecycle."""
    settings: Settings = app.state.settings
    app.state.redis = aioredis.from_url(settings.REDIS_URL, decode_responses=True)
    app.state.cache = RedisCache(app.state.redis)
    logger.info("Redis connection pool created")

    yield

    await app.state.redis.aclose()
    await app.state.engine.dispose()
    logger.info("Redis and database pools closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Commerce Service",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.verifier = HS256Verifier(settings.ACCESS_TOKEN_SECRET, settings.JWT_ALGORITHM)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AccessLogMiddleware)
    # Added last so it wraps the access log and its lines carry the request id.
    app.add_middleware(CorrelationIdMiddleware)

    _register_exception_handlers(app)

    app.include_router(health.router)
    for module in (posts, comments, products, packages, orders, native_products):
        app.include_router(module.router, responses=ERROR_RESPONSES)

    return app


def _error_body(code: ErrorCode, message: str) -> dict[str, str]:
    return {"code": code.value, "message": message}


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error(_req: Request, exc: AppError) -> JSONResponse:
        status = _STATUS_BY_ERROR.get(type(exc), 500)
        if status == 500:
            logger.error("Unclassified application error: %s", exc.code)
        return JSONResponse(status_code=status, content=_error_body(exc.code, exc.detail))

    @app.exception_handler(RequestValidationError)
    async def _request_validation(_req: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Request validation failed: %s", exc.errors())
        err = service_error(ErrorCode.INVALID_ARGUMENT)
        return JSONResponse(status_code=400, content=_error_body(err.code, err.detail))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(_req: Request, exc: StarletteHTTPException) -> JSONResponse:
        status, headers = exc.status_code, getattr(exc, "headers", None)
        # A path without a route for this method is reported as an unknown route.
        if status in (404, 405):
            status, code, headers = 404, ErrorCode.ROUTE_NOT_FOUND, None
        elif status < 500:
            code = ErrorCode.INVALID_ARGUMENT
        else:
            code = ErrorCode.INTERNAL_SERVER_ERROR
        err = service_error(code)
        return JSONResponse(
            status_code=status,
            content=_error_body(err.code, err.detail),
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def _unhandled(_req: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", exc_info=exc)
        err = service_error(ErrorCode.INTERNAL_SERVER_ERROR)
        return JSONResponse(status_code=500, content=_error_body(err.code, err.detail))
