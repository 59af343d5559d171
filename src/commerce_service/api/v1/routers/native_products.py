from __future__ import annotations

from fastapi import APIRouter, Query

from commerce_service.api.deps import UoWDep
from commerce_service.api.v1.schemas.common import PageResponse, raw_query, to_page_response
from commerce_service.api.v1.schemas.native_product import NativeProductResponse
from commerce_service.services import native_product_service

router = APIRouter(prefix="/api/v1/native-products", tags=["native-products"])


@router.get("", response_model=PageResponse[NativeProductResponse])
async def list_native_products(
    uow: UoWDep,
    next_key: str | None = Query(None, alias="nextKey"),
    limit: str | None = Query(None),
    region: str | None = Query(None),
    name: str | None = Query(None, description="Substring match"),
    product_id: str | None = Query(None, alias="productId"),
    no_product_id: str | None = Query(None, alias="noProductId"),
    source: str | None = Query(None),
    offset: str | None = Query(None),
) -> PageResponse[NativeProductResponse]:
    raw = raw_query(
        limit=limit,
        region=region,
        name=name,
        product_id=product_id,
        no_product_id=no_product_id,
        source=source,
        offset=offset,
    )
    page = await native_product_service.list_native_products(next_key, raw, uow)
    return to_page_response(page, NativeProductResponse)
