from __future__ import annotations

import jwt

from commerce_service.application.dto.principal import Principal
from commerce_service.application.exceptions import ErrorCode, service_error


class HS256Verifier:
    """Verify access tokens signed with the shared HS256 secret."""

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    async def verify(self, token: str) -> Principal:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "userId"]},
            )
        except jwt.PyJWTError as exc:
            raise service_error(ErrorCode.UNAUTHORIZED) from exc

        user_id = payload["userId"]
        if not isinstance(user_id, str) or not user_id:
            raise service_error(ErrorCode.UNAUTHORIZED)
        return Principal(user_id=user_id)
