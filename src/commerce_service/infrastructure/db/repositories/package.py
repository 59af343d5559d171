from __future__ import annotations

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_service.application.dto.package import CreatePackageDTO
from commerce_service.application.exceptions import StoreError, StoreErrorKind
from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.product import Package
from commerce_service.infrastructure.db.mappers import product as mapper
from commerce_service.infrastructure.db.models.native_product import NativePackageModel
from commerce_service.infrastructure.db.models.product import PackageModel, ProductModel
from commerce_service.infrastructure.db.repositories._cursor import apply_store_query


class PackageReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_packages(self, query: StoreQuery) -> list[Package]:
        stmt = select(PackageModel).where(PackageModel.region == query.filters["region"])
        product_id = query.filters.get("product_id")
        if product_id is not None:
            stmt = stmt.where(PackageModel.product_id == product_id)
        stmt = apply_store_query(stmt, PackageModel, query)
        result = await self._session.execute(stmt)
        return [mapper.package_to_entity(m) for m in result.scalars().all()]


class PackageWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, data: CreatePackageDTO) -> Package:
        if await self._session.get(ProductModel, data.product_id) is None:
            raise StoreError(StoreErrorKind.PRODUCT_NOT_FOUND, f"product {data.product_id}")
        stmt = (
            insert(PackageModel)
            .values(name=data.name, region=data.region, product_id=data.product_id)
            .returning(PackageModel)
        )
        model = (await self._session.execute(stmt)).scalar_one()
        return mapper.package_to_entity(model)

    async def delete(self, package_id: int) -> None:
        stmt = delete(PackageModel).where(PackageModel.id == package_id).returning(PackageModel.id)
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"package {package_id}")

    async def pair(self, package_id: int, native_package_id: str, source: str) -> None:
        if await self._session.get(PackageModel, package_id) is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"package {package_id}")
        stmt = (
            update(NativePackageModel)
            .where(
                NativePackageModel.id == native_package_id,
                NativePackageModel.source == source,
            )
            .values(package_id=package_id, updated_at=func.now())
            .returning(NativePackageModel.id)
        )
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise StoreError(
                StoreErrorKind.NATIVE_PACKAGE_NOT_FOUND,
                f"native package {source}/{native_package_id}",
            )
