from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.comment import Comment


class CommentReader(Protocol):
    async def get(self, comment_id: UUID) -> Comment: ...

    async def list_comments(self, query: StoreQuery) -> list[Comment]:
        """Filters: ``post_id`` (required) and ``parent_id`` (None lists top-level comments)."""
        ...


class CommentWriter(Protocol):
    async def create(self, comment: Comment) -> Comment: ...

    async def soft_delete(self, comment_id: UUID, ts: datetime, *, with_replies: bool) -> None: ...
