from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from commerce_service.application.dto.comment import CreateCommentDTO, ListCommentsOptions
from commerce_service.application.dto.principal import Principal
from commerce_service.application.exceptions import (
    ErrorCode,
    StoreErrorKind,
    service_error,
    translate_store_errors,
)
from commerce_service.application.pagination import (
    Page,
    PaginationPolicy,
    SortKey,
    paginate,
    resolve_options,
)
from commerce_service.application.policies.permissions import assert_author
from commerce_service.application.uow import UnitOfWork
from commerce_service.domain.entities.comment import Comment

logger = logging.getLogger(__name__)

LISTING_POLICY = PaginationPolicy.keyset(SortKey("created_at"), SortKey("id"))

_POST_ERRORS = {StoreErrorKind.NOT_FOUND: ErrorCode.POST_NOT_FOUND}
_COMMENT_ERRORS = {
    StoreErrorKind.NOT_FOUND: ErrorCode.COMMENT_NOT_FOUND,
    StoreErrorKind.POST_NOT_FOUND: ErrorCode.POST_NOT_FOUND,
}


async def create_comment(data: CreateCommentDTO, uow: UnitOfWork) -> Comment:
    """Comment on a post, or reply to one of its top-level comments."""
    with translate_store_errors(_POST_ERRORS):
        post = await uow.posts.get(data.post_id)

    if data.parent_id is not None:
        with translate_store_errors(_COMMENT_ERRORS):
            parent = await uow.comments.get(data.parent_id)
        if parent.post_id != post.id:
            raise service_error(ErrorCode.PARENT_COMMENT_NOT_MATCH_WITH_POST)
        if parent.parent_id is not None:
            raise service_error(ErrorCode.COMMENT_ON_SUBCOMMENT)

    comment = Comment(
        id=uuid.uuid4(),
        content=data.content,
        post_id=post.id,
        parent_id=data.parent_id,
        author_id=data.user_id,
        created_at=datetime.now(timezone.utc),
    )
    with translate_store_errors(_COMMENT_ERRORS):
        comment = await uow.comments_w.create(comment)
    await uow.commit()
    return comment


async def list_comments(
    next_key: str | None,
    raw: Mapping[str, Any],
    uow: UnitOfWork,
) -> Page[Comment]:
    options = resolve_options(ListCommentsOptions, next_key=next_key, raw=raw)
    with translate_store_errors(_POST_ERRORS):
        await uow.posts.get(options.post_id)
    return await paginate(options, LISTING_POLICY, uow.comments.list_comments)


async def delete_comment(
    comment_id: uuid.UUID,
    principal: Principal,
    uow: UnitOfWork,
) -> None:
    """Soft-delete a comment; deleting a top-level comment also removes its replies."""
    with translate_store_errors(_COMMENT_ERRORS):
        comment = await uow.comments.get(comment_id)
    assert_author(principal, comment.author_id)

    await uow.comments_w.soft_delete(
        comment_id,
        datetime.now(timezone.utc),
        with_replies=comment.parent_id is None,
    )
    await uow.commit()
    logger.info("Comment %s deleted by %s", comment_id, principal.user_id)
