from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from commerce_service.application.pagination.codec import encode_next_key
from commerce_service.application.pagination.options import ListOptions
from commerce_service.application.pagination.policy import CursorKind, PaginationPolicy
from commerce_service.application.pagination.translator import StoreQuery, to_store_query

T = TypeVar("T")
RowT = TypeVar("RowT")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    items: list[T] = field(default_factory=list)
    next_key: str | None = None


def _next_position(options: ListOptions, last: Any, policy: PaginationPolicy) -> str | int:
    if policy.kind is CursorKind.KEYSET:
        value = getattr(last, policy.id_field)
        return value if isinstance(value, int) else str(value)
    return (getattr(options, "offset", None) or 0) + options.limit


def assemble(
    options: ListOptions,
    rows: Sequence[RowT],
    policy: PaginationPolicy,
    formatter: Callable[[RowT], T] | None = None,
) -> Page[Any]:
    items = [formatter(row) for row in rows] if formatter else list(rows)
    if not rows or not policy.has_more(len(rows), options.limit):
        return Page(items=items)

    state = options.model_dump(by_alias=True, mode="json", exclude_none=True)
    state[policy.cursor_field] = _next_position(options, rows[-1], policy)
    return Page(items=items, next_key=encode_next_key(state))


async def paginate(
    options: ListOptions,
    policy: PaginationPolicy,
    fetch: Callable[[StoreQuery], Awaitable[Sequence[RowT]]],
    formatter: Callable[[RowT], T] | None = None,
) -> Page[Any]:
    """Run one page of a listing against the store."""
    rows = await fetch(to_store_query(options, policy))
    return assemble(options, rows, policy, formatter)
