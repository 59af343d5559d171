from __future__ import annotations

from typing import Protocol

from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.native_product import NativeProduct


class NativeProductReader(Protocol):
    async def list_native_products(self, query: StoreQuery) -> list[NativeProduct]:
        """Filters: ``name`` (substring), ``product_id``, ``no_product_id``, ``region``, ``source``."""
        ...
