from __future__ import annotations

from typing import Protocol

from commerce_service.application.repositories.comment import CommentReader, CommentWriter
from commerce_service.application.repositories.native_product import NativeProductReader
from commerce_service.application.repositories.order import OrderReader
from commerce_service.application.repositories.package import PackageReader, PackageWriter
from commerce_service.application.repositories.post import PostReader, PostWriter
from commerce_service.application.repositories.product import ProductReader, ProductWriter


class UnitOfWork(Protocol):
    posts: PostReader
    posts_w: PostWriter
    comments: CommentReader
    comments_w: CommentWriter
    products: ProductReader
    products_w: ProductWriter
    packages: PackageReader
    packages_w: PackageWriter
    orders: OrderReader
    native_products: NativeProductReader

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
    async def flush(self) -> None: ...
