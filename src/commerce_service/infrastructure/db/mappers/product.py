from __future__ import annotations

from commerce_service.domain.entities.product import Package, Product
from commerce_service.infrastructure.db.models.product import PackageModel, ProductModel


def package_to_entity(model: PackageModel) -> Package:
    return Package(
        id=model.id,
        name=model.name,
        region=model.region,
        product_id=model.product_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def model_to_entity(model: ProductModel, *, with_packages: bool = False) -> Product:
    packages = None
    if with_packages:
        packages = tuple(package_to_entity(p) for p in model.packages)
    return Product(
        id=model.id,
        name=model.name,
        region=model.region,
        created_at=model.created_at,
        updated_at=model.updated_at,
        packages=packages,
    )
