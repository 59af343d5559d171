from __future__ import annotations

from typing import Protocol

from commerce_service.application.dto.product import CreateProductDTO, UpdateProductDTO
from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.product import Product


class ProductReader(Protocol):
    async def get(self, product_id: int, *, with_packages: bool = False) -> Product: ...

    async def list_products(self, query: StoreQuery) -> list[Product]: ...


class ProductWriter(Protocol):
    async def create(self, data: CreateProductDTO) -> Product: ...

    async def update(self, product_id: int, data: UpdateProductDTO) -> None: ...

    async def delete(self, product_id: int) -> None: ...

    async def link(self, product_id: int, native_product_id: str, source: str) -> None:
        """Map a native product onto the product."""
        ...

    async def unlink(self, product_id: int, native_product_id: str, source: str) -> None: ...
