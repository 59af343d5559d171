"""Import all models so Base.metadata knows every table."""
from commerce_service.infrastructure.db.models.comment import CommentModel
from commerce_service.infrastructure.db.models.native_product import (
    NativePackageModel,
    NativeProductModel,
)
from commerce_service.infrastructure.db.models.order import OrderModel

from commerce_service.infrastructure.db.models.post import PostLikeModel, PostModel
from commerce_service.infrastructure.db.models.product import PackageModel, ProductModel

__all__ = [
    "CommentModel",
    "NativePackageModel",
    "NativeProductModel",
    "OrderModel",
    "PackageModel",
    "PostLikeModel",
    "PostModel",
    "ProductModel",
]
