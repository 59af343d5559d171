from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pydantic import Field

from commerce_service.application.pagination import MAX_LIMIT, ListOptions

DEFAULT_LIMIT = 15


class ListCommentsOptions(ListOptions):
    """Without ``parent_id`` only top-level comments of the post are listed."""

    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    post_id: UUID
    parent_id: UUID | None = None
    cursor: UUID | None = None


@dataclass(frozen=True, slots=True)
class CreateCommentDTO:
    content: str
    post_id: UUID
    user_id: str
    parent_id: UUID | None = None
