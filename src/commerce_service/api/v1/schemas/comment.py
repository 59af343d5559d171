from __future__ import annotations

from datetime import datetime
from uuid import UUID

from commerce_service.api.v1.schemas.common import CamelModel


class CreateCommentRequest(CamelModel):
    content: str
    post_id: UUID
    parent_id: UUID | None = None


class CommentResponse(CamelModel):
    id: UUID
    content: str
    post_id: UUID
    parent_id: UUID | None
    author_id: str
    created_at: datetime
