from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from commerce_service.application.dto.order import ListOrdersOptions
from commerce_service.application.exceptions import (
    ErrorCode,
    StoreErrorKind,
    translate_store_errors,
)
from commerce_service.application.pagination import (
    Page,
    PaginationPolicy,
    SortKey,
    paginate,
    resolve_options,
)
from commerce_service.application.uow import UnitOfWork
from commerce_service.domain.entities.order import Order

LISTING_POLICY = PaginationPolicy.offset(SortKey("id", descending=False))

_ERRORS = {StoreErrorKind.NOT_FOUND: ErrorCode.ORDER_NOT_FOUND}


async def get_order(order_id: int, uow: UnitOfWork) -> Order:
    with translate_store_errors(_ERRORS):
        return await uow.orders.get(order_id)


async def list_orders(
    next_key: str | None,
    raw: Mapping[str, Any],
    uow: UnitOfWork,
) -> Page[Order]:
    options = resolve_options(ListOrdersOptions, next_key=next_key, raw=raw)
    return await paginate(options, LISTING_POLICY, uow.orders.list_orders)
