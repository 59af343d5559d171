from __future__ import annotations

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from commerce_service.application.dto.product import CreateProductDTO, UpdateProductDTO
from commerce_service.application.exceptions import StoreError, StoreErrorKind
from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.product import Product
from commerce_service.infrastructure.db.mappers import product as mapper
from commerce_service.infrastructure.db.models.native_product import NativeProductModel
from commerce_service.infrastructure.db.models.product import ProductModel
from commerce_service.infrastructure.db.repositories._cursor import apply_store_query


class ProductReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, product_id: int, *, with_packages: bool = False) -> Product:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        if with_packages:
            stmt = stmt.options(selectinload(ProductModel.packages))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"product {product_id}")
        return mapper.model_to_entity(model, with_packages=with_packages)

    async def list_products(self, query: StoreQuery) -> list[Product]:
        with_packages = bool(query.filters.get("with_packages"))
        stmt = select(ProductModel).where(ProductModel.region == query.filters["region"])
        if with_packages:
            stmt = stmt.options(selectinload(ProductModel.packages))
        stmt = apply_store_query(stmt, ProductModel, query)
        result = await self._session.execute(stmt)
        return [
            mapper.model_to_entity(m, with_packages=with_packages) for m in result.scalars().all()
        ]


class ProductWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, data: CreateProductDTO) -> Product:
        stmt = (
            insert(ProductModel)
            .values(name=data.name, region=data.region)
            .returning(ProductModel)
        )
        model = (await self._session.execute(stmt)).scalar_one()
        return mapper.model_to_entity(model)

    async def update(self, product_id: int, data: UpdateProductDTO) -> None:
        values = {k: v for k, v in (("name", data.name), ("region", data.region)) if v is not None}
        stmt = (
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(**values, updated_at=func.now())
            .returning(ProductModel.id)
        )
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"product {product_id}")

    async def delete(self, product_id: int) -> None:
        stmt = delete(ProductModel).where(ProductModel.id == product_id).returning(ProductModel.id)
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"product {product_id}")

    async def link(self, product_id: int, native_product_id: str, source: str) -> None:
        await self._set_native_product(native_product_id, source, product_id)

    async def unlink(self, product_id: int, native_product_id: str, source: str) -> None:
        await self._set_native_product(
            native_product_id, source, None, current_product_id=product_id
        )

    async def _set_native_product(
        self,
        native_product_id: str,
        source: str,
        product_id: int | None,
        *,
        current_product_id: int | None = None,
    ) -> None:
        stmt = update(NativeProductModel).where(
            NativeProductModel.id == native_product_id,
            NativeProductModel.source == source,
        )
        if current_product_id is not None:
            stmt = stmt.where(NativeProductModel.product_id == current_product_id)
        stmt = stmt.values(product_id=product_id, updated_at=func.now()).returning(
            NativeProductModel.id
        )
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise StoreError(
                StoreErrorKind.NATIVE_PRODUCT_NOT_FOUND,
                f"native product {source}/{native_product_id}",
            )
