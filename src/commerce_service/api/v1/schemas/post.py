from __future__ import annotations

from datetime import datetime
from uuid import UUID

from commerce_service.api.v1.schemas.comment import CommentResponse
from commerce_service.api.v1.schemas.common import CamelModel


class CreatePostRequest(CamelModel):
    title: str
    content: str


class PostResponse(CamelModel):
    id: UUID
    title: str
    content: str
    like_count: int
    author_id: str
    created_at: datetime
    comments: list[CommentResponse] | None = None
