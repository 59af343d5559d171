from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from pydantic import Field

from commerce_service.application.pagination import MAX_LIMIT, ListOptions
from commerce_service.domain.value_objects.enums import PostOrderBy

DEFAULT_LIMIT = 15


class ListPostsOptions(ListOptions):
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    order_by: PostOrderBy
    author_id: str | None = None
    cursor: UUID | None = None


@dataclass(frozen=True, slots=True)
class CreatePostDTO:
    title: str
    content: str
    user_id: str
