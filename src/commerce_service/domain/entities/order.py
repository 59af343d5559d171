from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class OrderCustomer:
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class OrderItemRef:
    """Product or package an order points at.

    ``id`` is None while the native listing has not been mapped yet.
    """

    id: int | None
    name: str


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    status: str
    quantity: int
    customer: OrderCustomer
    booked_at: datetime
    departure_at: datetime
    native_id: str
    source: str
    region: str
    product: OrderItemRef
    package: OrderItemRef
    created_at: datetime
    updated_at: datetime
