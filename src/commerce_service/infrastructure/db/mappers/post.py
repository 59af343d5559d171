from __future__ import annotations

from commerce_service.domain.entities.comment import Comment
from commerce_service.domain.entities.post import Post
from commerce_service.infrastructure.db.models.post import PostModel


def model_to_entity(model: PostModel, comments: tuple[Comment, ...] | None = None) -> Post:
    return Post(
        id=model.id,
        title=model.title,
        content=model.content,
        like_count=model.like_count,
        author_id=model.author_id,
        created_at=model.created_at,
        deleted_at=model.deleted_at,
        comments=comments,
    )


def entity_to_model(entity: Post) -> PostModel:
    return PostModel(
        id=entity.id,
        title=entity.title,
        content=entity.content,
        like_count=entity.like_count,
        author_id=entity.author_id,
        created_at=entity.created_at,
        deleted_at=entity.deleted_at,
    )
