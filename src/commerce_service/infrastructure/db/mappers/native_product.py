from __future__ import annotations

from commerce_service.domain.entities.native_product import NativePackage, NativeProduct
from commerce_service.infrastructure.db.models.native_product import (
    NativePackageModel,
    NativeProductModel,
)


def package_to_entity(model: NativePackageModel) -> NativePackage:
    return NativePackage(
        id=model.id,
        name=model.name,
        source=model.source,
        region=model.region,
        package_id=model.package_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def model_to_entity(model: NativeProductModel) -> NativeProduct:
    return NativeProduct(
        id=model.id,
        name=model.name,
        source=model.source,
        region=model.region,
        product_id=model.product_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
        packages=tuple(package_to_entity(p) for p in model.packages),
    )
