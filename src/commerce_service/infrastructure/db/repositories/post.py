from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_service.application.exceptions import StoreError, StoreErrorKind
from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.post import Post
from commerce_service.infrastructure.db.mappers import post as mapper
from commerce_service.infrastructure.db.models.comment import CommentModel
from commerce_service.infrastructure.db.models.post import PostLikeModel, PostModel
from commerce_service.infrastructure.db.repositories._cursor import apply_store_query


def _live(model):
    return model.deleted_at.is_(None)


class PostReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, post_id: UUID) -> Post:
        stmt = select(PostModel).where(PostModel.id == post_id, _live(PostModel))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"post {post_id}")
        return mapper.model_to_entity(model)

    async def list_posts(self, query: StoreQuery) -> list[Post]:
        stmt = select(PostModel).where(_live(PostModel))
        author_id = query.filters.get("author_id")
        if author_id is not None:
            stmt = stmt.where(PostModel.author_id == author_id)
        stmt = apply_store_query(stmt, PostModel, query, visible=_live)
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class PostWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, post: Post) -> Post:
        model = mapper.entity_to_model(post)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)

    async def soft_delete(self, post_id: UUID, ts: datetime) -> None:
        await self._session.execute(
            update(PostModel)
            .where(PostModel.id == post_id, _live(PostModel))
            .values(deleted_at=ts)
        )
        await self._session.execute(
            update(CommentModel)
            .where(CommentModel.post_id == post_id, _live(CommentModel))
            .values(deleted_at=ts)
        )

    async def add_like(self, post_id: UUID, user_id: str) -> None:
        stmt = (
            pg_insert(PostLikeModel)
            .values(post_id=post_id, user_id=user_id)
            .on_conflict_do_nothing(index_elements=["post_id", "user_id"])
            .returning(PostLikeModel.user_id)
        )
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise StoreError(StoreErrorKind.DUPLICATED, f"post {post_id} liked by {user_id}")
        await self._bump_like_count(post_id, 1)

    async def remove_like(self, post_id: UUID, user_id: str) -> None:
        stmt = (
            delete(PostLikeModel)
            .where(PostLikeModel.post_id == post_id, PostLikeModel.user_id == user_id)
            .returning(PostLikeModel.user_id)
        )
        result = await self._session.execute(stmt)
        if result.scalar_one_or_none() is None:
            raise StoreError(StoreErrorKind.NOT_LIKED, f"post {post_id} not liked by {user_id}")
        await self._bump_like_count(post_id, -1)

    async def _bump_like_count(self, post_id: UUID, delta: int) -> None:
        await self._session.execute(
            update(PostModel)
            .where(PostModel.id == post_id)
            .values(like_count=PostModel.like_count + delta)
        )
