from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class Comment:
    id: UUID
    content: str
    post_id: UUID
    parent_id: UUID | None
    author_id: str
    created_at: datetime
    deleted_at: datetime | None = None
