from __future__ import annotations

from fastapi import APIRouter, Query, Response

from commerce_service.api.deps import UoWDep
from commerce_service.api.v1.schemas.common import PageResponse, raw_query, to_page_response
from commerce_service.api.v1.schemas.product import (
    CreatePackageRequest,
    PackageResponse,
    PairPackageRequest,
)
from commerce_service.application.dto.package import CreatePackageDTO, PairPackageDTO
from commerce_service.services import package_service

router = APIRouter(prefix="/api/v1/packages", tags=["packages"])


@router.post("", response_model=PackageResponse, status_code=201)
async def create_package(body: CreatePackageRequest, uow: UoWDep) -> PackageResponse:
    package = await package_service.create_package(
        CreatePackageDTO(name=body.name, region=body.region, product_id=body.product_id), uow
    )
    return PackageResponse.model_validate(package)


@router.get("", response_model=PageResponse[PackageResponse])
async def list_packages(
    uow: UoWDep,
    next_key: str | None = Query(None, alias="nextKey"),
    limit: str | None = Query(None),
    region: str | None = Query(None),
    product_id: str | None = Query(None, alias="productId"),
) -> PageResponse[PackageResponse]:
    raw = raw_query(limit=limit, region=region, product_id=product_id)
    page = await package_service.list_packages(next_key, raw, uow)
    return to_page_response(page, PackageResponse)


@router.delete("/{package_id}", status_code=204)
async def delete_package(package_id: int, uow: UoWDep) -> Response:
    await package_service.delete_package(package_id, uow)
    return Response(status_code=204)


@router.post("/{package_id}/pair", status_code=204)
async def pair_package(package_id: int, body: PairPackageRequest, uow: UoWDep) -> Response:
    await package_service.pair_package(
        PairPackageDTO(package_id, body.native_package_id, body.source), uow
    )
    return Response(status_code=204)
