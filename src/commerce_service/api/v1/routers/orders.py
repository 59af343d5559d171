from __future__ import annotations

from fastapi import APIRouter, Query

from commerce_service.api.deps import UoWDep
from commerce_service.api.v1.schemas.common import PageResponse, raw_query, to_page_response
from commerce_service.api.v1.schemas.order import OrderResponse
from commerce_service.services import order_service

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, uow: UoWDep) -> OrderResponse:
    order = await order_service.get_order(order_id, uow)
    return OrderResponse.model_validate(order)


@router.get("", response_model=PageResponse[OrderResponse])
async def list_orders(
    uow: UoWDep,
    next_key: str | None = Query(None, alias="nextKey"),
    limit: str | None = Query(None),
    region: str | None = Query(None),
    offset: str | None = Query(None),
) -> PageResponse[OrderResponse]:
    raw = raw_query(limit=limit, region=region, offset=offset)
    page = await order_service.list_orders(next_key, raw, uow)
    return to_page_response(page, OrderResponse)
