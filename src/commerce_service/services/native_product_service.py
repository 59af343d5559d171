from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from commerce_service.application.dto.native_product import ListNativeProductsOptions
from commerce_service.application.pagination import (
    Page,
    PaginationPolicy,
    SortKey,
    paginate,
    resolve_options,
)
from commerce_service.application.uow import UnitOfWork
from commerce_service.domain.entities.native_product import NativeProduct

# Unmapped listings first so they surface for review.
LISTING_POLICY = PaginationPolicy.offset(
    SortKey("product_id", nulls_first=True),
    SortKey("created_at"),
    SortKey("source"),
    SortKey("id"),
)


async def list_native_products(
    next_key: str | None,
    raw: Mapping[str, Any],
    uow: UnitOfWork,
) -> Page[NativeProduct]:
    options = resolve_options(ListNativeProductsOptions, next_key=next_key, raw=raw)
    return await paginate(options, LISTING_POLICY, uow.native_products.list_native_products)
