from __future__ import annotations

from fastapi import APIRouter, Query, Response

from commerce_service.api.deps import UoWDep
from commerce_service.api.v1.schemas.common import PageResponse, raw_query, to_page_response
from commerce_service.api.v1.schemas.product import (
    CreateProductRequest,
    LinkProductRequest,
    ProductResponse,
    UpdateProductRequest,
)
from commerce_service.application.dto.product import (
    CreateProductDTO,
    LinkProductDTO,
    UpdateProductDTO,
)
from commerce_service.services import product_service

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    uow: UoWDep,
    with_packages: bool = Query(False, alias="withPackages"),
) -> ProductResponse:
    product = await product_service.get_product(product_id, with_packages, uow)
    return ProductResponse.model_validate(product)


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(body: CreateProductRequest, uow: UoWDep) -> ProductResponse:
    product = await product_service.create_product(
        CreateProductDTO(name=body.name, region=body.region), uow
    )
    return ProductResponse.model_validate(product)


@router.get("", response_model=PageResponse[ProductResponse])
async def list_products(
    uow: UoWDep,
    next_key: str | None = Query(None, alias="nextKey"),
    limit: str | None = Query(None),
    region: str | None = Query(None),
    with_packages: str | None = Query(None, alias="withPackages"),
) -> PageResponse[ProductResponse]:
    raw = raw_query(limit=limit, region=region, with_packages=with_packages)
    page = await product_service.list_products(next_key, raw, uow)
    return to_page_response(page, ProductResponse)


@router.patch("/{product_id}", status_code=204)
async def update_product(product_id: int, body: UpdateProductRequest, uow: UoWDep) -> Response:
    await product_service.update_product(
        product_id, UpdateProductDTO(name=body.name, region=body.region), uow
    )
    return Response(status_code=204)


@router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: int, uow: UoWDep) -> Response:
    await product_service.delete_product(product_id, uow)
    return Response(status_code=204)


@router.post("/{product_id}/link", status_code=204)
async def link_product(product_id: int, body: LinkProductRequest, uow: UoWDep) -> Response:
    await product_service.link_product(
        LinkProductDTO(product_id, body.native_product_id, body.source), uow
    )
    return Response(status_code=204)


@router.delete("/{product_id}/link", status_code=204)
async def unlink_product(product_id: int, body: LinkProductRequest, uow: UoWDep) -> Response:
    await product_service.unlink_product(
        LinkProductDTO(product_id, body.native_product_id, body.source), uow
    )
    return Response(status_code=204)
