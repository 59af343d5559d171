from __future__ import annotations

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")

HEADER = "X-Request-ID"

# Caller-supplied ids end up in log lines, so only accept short plain tokens.
_ACCEPTED_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def _request_id_from(request: Request) -> str:
    supplied = request.headers.get(HEADER, "")
    if _ACCEPTED_ID.match(supplied):
        return supplied
    return uuid.uuid4().hex


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Bind a request id for the duration of the request and echo it back."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = _request_id_from(request)
        request.state.request_id = request_id
        reset_token = correlation_id_ctx.set(request_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_ctx.reset(reset_token)
        response.headers[HEADER] = request_id
        return response
