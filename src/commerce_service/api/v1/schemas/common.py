from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Wire models speak camelCase; Python code uses snake_case names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PageResponse(CamelModel, Generic[T]):
    items: list[T]  # type: ignore[type-var]
    next_key: str | None = None


class ErrorResponse(BaseModel):
    code: str
    message: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status: {"model": ErrorResponse} for status in (400, 401, 403, 404, 409)
}


def to_page_response(page: Any, item_model: type[CamelModel]) -> PageResponse[Any]:
    return PageResponse[item_model](  # type: ignore[valid-type]
        items=[item_model.model_validate(item) for item in page.items],
        next_key=page.next_key,
    )


def raw_query(**params: str | None) -> dict[str, str]:
    """Listing query params as sent, keyed by their camelCase wire names."""
    return {to_camel(name): value for name, value in params.items() if value is not None}
