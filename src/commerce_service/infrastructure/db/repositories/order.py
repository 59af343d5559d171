from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from commerce_service.application.exceptions import StoreError, StoreErrorKind
from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.order import Order
from commerce_service.infrastructure.db.mappers import order as mapper
from commerce_service.infrastructure.db.models.native_product import (
    NativePackageModel,
    NativeProductModel,
)
from commerce_service.infrastructure.db.models.order import OrderModel
from commerce_service.infrastructure.db.repositories._cursor import apply_store_query

_WITH_LISTINGS = (
    selectinload(OrderModel.native_product).selectinload(NativeProductModel.product),
    selectinload(OrderModel.native_package).selectinload(NativePackageModel.package),
)


class OrderReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, order_id: int) -> Order:
        stmt = select(OrderModel).where(OrderModel.id == order_id).options(*_WITH_LISTINGS)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"order {order_id}")
        return mapper.model_to_entity(model)

    async def list_orders(self, query: StoreQuery) -> list[Order]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.region == query.filters["region"])
            .options(*_WITH_LISTINGS)
        )
        stmt = apply_store_query(stmt, OrderModel, query)
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]
