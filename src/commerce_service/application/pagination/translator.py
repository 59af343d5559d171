from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from commerce_service.application.pagination.options import ListOptions
from commerce_service.application.pagination.policy import (
    CursorKind,
    PaginationPolicy,
    SortKey,
)


@dataclass(frozen=True, slots=True)
class StoreQuery:
    """What a repository list call needs: filters, ordering and position.

    ``cursor`` is the id the page starts at and ``skip`` the number of rows
    dropped from that start (1 for keyset pages, the offset otherwise).
    """

    sort: tuple[SortKey, ...]
    limit: int
    filters: Mapping[str, Any] = field(default_factory=dict)
    cursor: UUID | int | None = None
    skip: int = 0


def to_store_query(options: ListOptions, policy: PaginationPolicy) -> StoreQuery:
    cursor_field = policy.cursor_field
    filters = options.model_dump(exclude={"limit", cursor_field}, exclude_none=True)
    position = getattr(options, cursor_field, None)

    if policy.kind is CursorKind.KEYSET:
        return StoreQuery(
            sort=policy.sort,
            limit=options.limit,
            filters=filters,
            cursor=position,
            skip=1 if position is not None else 0,
        )
    return StoreQuery(
        sort=policy.sort,
        limit=options.limit,
        filters=filters,
        skip=position or 0,
    )
