from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from commerce_service.application.pagination import StoreQuery
from commerce_service.domain.entities.post import Post


class PostReader(Protocol):
    async def get(self, post_id: UUID) -> Post:
        """Return a live (not soft-deleted) post. Raise StoreError(NOT_FOUND) otherwise."""
        ...

    async def list_posts(self, query: StoreQuery) -> list[Post]: ...


class PostWriter(Protocol):
    async def create(self, post: Post) -> Post: ...

    async def soft_delete(self, post_id: UUID, ts: datetime) -> None:
        """Mark the post and all of its comments deleted."""
        ...

    async def add_like(self, post_id: UUID, user_id: str) -> None:
        """Record the like and bump like_count. StoreError(DUPLICATED) if already liked."""
        ...

    async def remove_like(self, post_id: UUID, user_id: str) -> None:
        """Drop the like and decrement like_count. StoreError(NOT_LIKED) if absent."""
        ...
