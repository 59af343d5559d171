from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from commerce_service.domain.entities.comment import Comment


@dataclass(frozen=True, slots=True)
class Post:
    id: UUID
    title: str
    content: str
    like_count: int
    author_id: str
    created_at: datetime
    deleted_at: datetime | None = None
    comments: tuple[Comment, ...] | None = None
