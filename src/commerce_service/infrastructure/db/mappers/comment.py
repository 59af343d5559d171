from __future__ import annotations

from commerce_service.domain.entities.comment import Comment
from commerce_service.infrastructure.db.models.comment import CommentModel


def model_to_entity(model: CommentModel) -> Comment:
    return Comment(
        id=model.id,
        content=model.content,
        post_id=model.post_id,
        parent_id=model.parent_id,
        author_id=model.author_id,
        created_at=model.created_at,
        deleted_at=model.deleted_at,
    )


def entity_to_model(entity: Comment) -> CommentModel:
    return CommentModel(
        id=entity.id,
        content=entity.content,
        post_id=entity.post_id,
        parent_id=entity.parent_id,
        author_id=entity.author_id,
        created_at=entity.created_at,
        deleted_at=entity.deleted_at,
    )
