from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from commerce_service.application.dto.product import (
    CreateProductDTO,
    LinkProductDTO,
    ListProductsOptions,
    UpdateProductDTO,
)
from commerce_service.application.exceptions import (
    ErrorCode,
    StoreErrorKind,
    translate_store_errors,
)
from commerce_service.application.pagination import (
    Page,
    PaginationPolicy,
    SortKey,
    paginate,
    resolve_options,
)
from commerce_service.application.uow import UnitOfWork
from commerce_service.domain.entities.product import Product

LISTING_POLICY = PaginationPolicy.keyset(SortKey("id", descending=False))

_ERRORS = {
    StoreErrorKind.NOT_FOUND: ErrorCode.PRODUCT_NOT_FOUND,
    StoreErrorKind.PRODUCT_NOT_FOUND: ErrorCode.PRODUCT_NOT_FOUND,
    StoreErrorKind.NATIVE_PRODUCT_NOT_FOUND: ErrorCode.NATIVE_PRODUCT_NOT_FOUND,
}


async def get_product(product_id: int, with_packages: bool, uow: UnitOfWork) -> Product:
    with translate_store_errors(_ERRORS):
        return await uow.products.get(product_id, with_packages=with_packages)


async def create_product(data: CreateProductDTO, uow: UnitOfWork) -> Product:
    product = await uow.products_w.create(data)
    await uow.commit()
    return product


async def list_products(
    next_key: str | None,
    raw: Mapping[str, Any],
    uow: UnitOfWork,
) -> Page[Product]:
    options = resolve_options(ListProductsOptions, next_key=next_key, raw=raw)
    return await paginate(options, LISTING_POLICY, uow.products.list_products)


async def update_product(product_id: int, data: UpdateProductDTO, uow: UnitOfWork) -> None:
    with translate_store_errors(_ERRORS):
        await uow.products_w.update(product_id, data)
    await uow.commit()


async def delete_product(product_id: int, uow: UnitOfWork) -> None:
    with translate_store_errors(_ERRORS):
        await uow.products_w.delete(product_id)
    await uow.commit()


async def link_product(data: LinkProductDTO, uow: UnitOfWork) -> None:
    with translate_store_errors(_ERRORS):
        await uow.products.get(data.product_id)
        await uow.products_w.link(data.product_id, data.native_product_id, data.source)
    await uow.commit()


async def unlink_product(data: LinkProductDTO, uow: UnitOfWork) -> None:
    with translate_store_errors(_ERRORS):
        await uow.products.get(data.product_id)
        await uow.products_w.unlink(data.product_id, data.native_product_id, data.source)
    await uow.commit()
