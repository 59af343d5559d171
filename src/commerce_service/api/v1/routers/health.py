from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])

_CHECK_TIMEOUT_S = 2.0


@router.get("/healthz")
async def healthz(request: Request) -> dict[str, str]:
    return {"status": "ok", "build": request.app.state.settings.BUILD_NUMBER}


async def _ping_postgres(request: Request) -> None:
    async with request.app.state.session_factory() as session:
        await session.execute(text("SELECT 1"))


async def _ping_redis(request: Request) -> None:
    await request.app.state.redis.ping()


async def _check(name: str, probe: Awaitable[None]) -> tuple[str, str]:
    try:
        await asyncio.wait_for(probe, timeout=_CHECK_TIMEOUT_S)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Readiness check %s failed: %r", name, exc)
        return name, f"error: {type(exc).__name__}"
    return name, "ok"


@router.get("/readyz")
async def readyz(request: Request) -> JSONResponse:
    results = await asyncio.gather(
        _check("postgres", _ping_postgres(request)),
        _check("redis", _ping_redis(request)),
    )
    checks = dict(results)
    ready = all(state == "ok" for state in checks.values())
    return JSONResponse(
        status_code=200 if ready else 503,
        content={"status": "ready" if ready else "unavailable", "checks": checks},
    )
