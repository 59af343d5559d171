from __future__ import annotations

import logging
from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from commerce_service.infrastructure.db.repositories.comment import (
    CommentReaderRepo,
    CommentWriterRepo,
)
from commerce_service.infrastructure.db.repositories.native_product import (
    NativeProductReaderRepo,
)
from commerce_service.infrastructure.db.repositories.order import OrderReaderRepo
from commerce_service.infrastructure.db.repositories.package import (
    PackageReaderRepo,
    PackageWriterRepo,
)
from commerce_service.infrastructure.db.repositories.post import PostReaderRepo, PostWriterRepo
from commerce_service.infrastructure.db.repositories.product import (
    ProductReaderRepo,
    ProductWriterRepo,
)

logger = logging.getLogger(__name__)


class SqlAlchemyUoW:
    """Unit of work over one AsyncSession; every repository shares its transaction."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self.posts = PostReaderRepo(session)
        self.posts_w = PostWriterRepo(session)
        self.comments = CommentReaderRepo(session)
        self.comments_w = CommentWriterRepo(session)
        self.products = ProductReaderRepo(session)
        self.products_w = ProductWriterRepo(session)
        self.packages = PackageReaderRepo(session)
        self.packages_w = PackageWriterRepo(session)
        self.orders = OrderReaderRepo(session)
        self.native_products = NativeProductReaderRepo(session)

    async def flush(self) -> None:
        await self._session.flush()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            logger.debug("Rolling back unit of work after %s", exc_type.__name__)
            await self.rollback()
