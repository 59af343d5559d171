from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_service.application.exceptions import StoreError, StoreErrorKind
from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.comment import Comment
from commerce_service.infrastructure.db.mappers import comment as mapper
from commerce_service.infrastructure.db.models.comment import CommentModel
from commerce_service.infrastructure.db.repositories._cursor import apply_store_query


def _live(model):
    return model.deleted_at.is_(None)


class CommentReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, comment_id: UUID) -> Comment:
        stmt = select(CommentModel).where(CommentModel.id == comment_id, _live(CommentModel))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise StoreError(StoreErrorKind.NOT_FOUND, f"comment {comment_id}")
        return mapper.model_to_entity(model)

    async def list_comments(self, query: StoreQuery) -> list[Comment]:
        parent_id = query.filters.get("parent_id")
        stmt = select(CommentModel).where(
            CommentModel.post_id == query.filters["post_id"],
            _live(CommentModel),
            CommentModel.parent_id.is_(None) if parent_id is None else CommentModel.parent_id == parent_id,
        )
        stmt = apply_store_query(stmt, CommentModel, query, visible=_live)
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]


class CommentWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, comment: Comment) -> Comment:
        model = mapper.entity_to_model(comment)
        self._session.add(model)
        await self._session.flush()
        return mapper.model_to_entity(model)

    async def soft_delete(self, comment_id: UUID, ts: datetime, *, with_replies: bool) -> None:
        target = CommentModel.id == comment_id
        if with_replies:
            target = or_(target, CommentModel.parent_id == comment_id)
        await self._session.execute(
            update(CommentModel).where(target, _live(CommentModel)).values(deleted_at=ts)
        )
