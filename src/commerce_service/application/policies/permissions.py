from __future__ import annotations

from commerce_service.application.dto.principal import Principal
from commerce_service.application.exceptions import ErrorCode, service_error


def assert_author(principal: Principal, author_id: str) -> None:
    """Raise unless the caller wrote the post or comment."""
    if principal.user_id != author_id:
        raise service_error(ErrorCode.NO_PERMISSION)
