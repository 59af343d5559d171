from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.native_product import NativeProduct
from commerce_service.infrastructure.db.mappers import native_product as mapper
from commerce_service.infrastructure.db.models.native_product import NativeProductModel
from commerce_service.infrastructure.db.repositories._cursor import apply_store_query


def filtered_native_products(filters: Mapping[str, Any]) -> Select:
    stmt = select(NativeProductModel).where(NativeProductModel.region == filters["region"])
    if filters.get("source") is not None:
        stmt = stmt.where(NativeProductModel.source == filters["source"])
    if filters.get("name"):
        # Literal, case-sensitive substring: % and _ in the input match themselves.
        stmt = stmt.where(NativeProductModel.name.contains(filters["name"], autoescape=True))
    if filters.get("product_id") is not None:
        stmt = stmt.where(NativeProductModel.product_id == filters["product_id"])
    elif filters.get("no_product_id"):
        stmt = stmt.where(NativeProductModel.product_id.is_(None))
    return stmt


class NativeProductReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_native_products(self, query: StoreQuery) -> list[NativeProduct]:
        stmt = filtered_native_products(query.filters).options(
            selectinload(NativeProductModel.packages)
        )
        stmt = apply_store_query(stmt, NativeProductModel, query)
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]
