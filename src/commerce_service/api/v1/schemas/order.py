from __future__ import annotations

from datetime import datetime

from commerce_service.api.v1.schemas.common import CamelModel
from commerce_service.domain.value_objects.enums import Region, Source


class OrderCustomerResponse(CamelModel):
    name: str
    email: str


class OrderItemResponse(CamelModel):
    id: int | None
    name: str


class OrderResponse(CamelModel):
    id: int
    status: str
    quantity: int
    customer: OrderCustomerResponse
    booked_at: datetime
    departure_at: datetime
    native_id: str
    source: Source
    region: Region
    product: OrderItemResponse
    package: OrderItemResponse
    created_at: datetime
    updated_at: datetime
