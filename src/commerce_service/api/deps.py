"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from commerce_service.application.dto.principal import Principal
from commerce_service.application.exceptions import ErrorCode, service_error
from commerce_service.application.ports.auth import TokenVerifier
from commerce_service.infrastructure.db.uow import SqlAlchemyUoW

# Missing credentials surface as our own 401 body, not FastAPI's 403.
_bearer_scheme = HTTPBearer(auto_error=False)


async def get_uow(request: Request) -> AsyncIterator[SqlAlchemyUoW]:
    async with request.app.state.session_factory() as session:
        async with SqlAlchemyUoW(session) as uow:
            yield uow


UoWDep = Annotated[SqlAlchemyUoW, Depends(get_uow)]


def get_verifier(request: Request) -> TokenVerifier:
    return request.app.state.verifier


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)],
    verifier: Annotated[TokenVerifier, Depends(get_verifier)],
) -> Principal:
    if credentials is None:
        raise service_error(ErrorCode.UNAUTHORIZED)
    return await verifier.verify(credentials.credentials)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
