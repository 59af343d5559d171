from __future__ import annotations

from datetime import datetime

from commerce_service.api.v1.schemas.common import CamelModel
from commerce_service.domain.value_objects.enums import Region, Source


class CreateProductRequest(CamelModel):
    name: str
    region: Region


class UpdateProductRequest(CamelModel):
    name: str | None = None
    region: Region | None = None


class LinkProductRequest(CamelModel):
    native_product_id: str
    source: Source


class PackageResponse(CamelModel):
    id: int
    name: str
    region: Region
    product_id: int
    created_at: datetime
    updated_at: datetime


class ProductResponse(CamelModel):
    id: int
    name: str
    region: Region
    created_at: datetime
    updated_at: datetime
    packages: list[PackageResponse] | None = None


class CreatePackageRequest(CamelModel):
    name: str
    region: Region
    product_id: int


class PairPackageRequest(CamelModel):
    native_package_id: str
    source: Source
