from __future__ import annotations

from typing import Protocol

from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.order import Order


class OrderReader(Protocol):
    async def get(self, order_id: int) -> Order: ...

    async def list_orders(self, query: StoreQuery) -> list[Order]: ...
