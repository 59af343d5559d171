from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from commerce_service.application.dto.package import (
    CreatePackageDTO,
    ListPackagesOptions,
    PairPackageDTO,
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
from commerce_service.domain.entities.product import Package

LISTING_POLICY = PaginationPolicy.keyset(SortKey("id", descending=False))

_ERRORS = {
    StoreErrorKind.NOT_FOUND: ErrorCode.PACKAGE_NOT_FOUND,
    StoreErrorKind.PRODUCT_NOT_FOUND: ErrorCode.PRODUCT_NOT_FOUND,
    StoreErrorKind.NATIVE_PACKAGE_NOT_FOUND: ErrorCode.NATIVE_PACKAGE_NOT_FOUND,
}


async def create_package(data: CreatePackageDTO, uow: UnitOfWork) -> Package:
    with translate_store_errors(_ERRORS):
        package = await uow.packages_w.create(data)
    await uow.commit()
    return package


async def list_packages(
    next_key: str | None,
    raw: Mapping[str, Any],
    uow: UnitOfWork,
) -> Page[Package]:
    options = resolve_options(ListPackagesOptions, next_key=next_key, raw=raw)
    return await paginate(options, LISTING_POLICY, uow.packages.list_packages)


async def delete_package(package_id: int, uow: UnitOfWork) -> None:
    with translate_store_errors(_ERRORS):
        await uow.packages_w.delete(package_id)
    await uow.commit()


async def pair_package(data: PairPackageDTO, uow: UnitOfWork) -> None:
    """Map a native package listed by an external source onto our package."""
    with translate_store_errors(_ERRORS):
        await uow.packages_w.pair(data.package_id, data.native_package_id, data.source)
    await uow.commit()
