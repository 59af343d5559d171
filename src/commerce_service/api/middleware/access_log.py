"""Access log: one line per request with status and latency."""
from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("commerce_service.access")

# Probes are polled every few seconds; keep them out of the access log.
_QUIET_PATHS = frozenset({"/api/v1/healthz", "/api/v1/readyz"})


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in _QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 1)

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        query = f"?{request.url.query}" if request.url.query else ""
        logger.log(
            level,
            "%s %s%s -> %s (%.1fms)",
            request.method,
            request.url.path,
            query,
            response.status_code,
            duration_ms,
            extra={"status_code": response.status_code, "duration_ms": duration_ms},
        )
        return response
