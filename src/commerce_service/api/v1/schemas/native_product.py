from __future__ import annotations

from datetime import datetime

from commerce_service.api.v1.schemas.common import CamelModel
from commerce_service.domain.value_objects.enums import Region, Source


class NativePackageResponse(CamelModel):
    id: str
    name: str
    source: Source
    region: Region
    package_id: int | None
    created_at: datetime
    updated_at: datetime


class NativeProductResponse(CamelModel):
    id: str
    name: str
    source: Source
    region: Region
    product_id: int | None
    created_at: datetime
    updated_at: datetime
    packages: list[NativePackageResponse]
