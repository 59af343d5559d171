from __future__ import annotations

from typing import Protocol

from commerce_service.application.dto.package import CreatePackageDTO
from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.product import Package


class PackageReader(Protocol):
    async def list_packages(self, query: StoreQuery) -> list[Package]: ...


class PackageWriter(Protocol):
    async def create(self, data: CreatePackageDTO) -> Package:
        """StoreError(PRODUCT_NOT_FOUND) when the product does not exist."""
        ...

    async def delete(self, package_id: int) -> None: ...

    async def pair(self, package_id: int, native_package_id: str, source: str) -> None: ...
