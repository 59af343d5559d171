from __future__ import annotations

import dataclasses
import logging
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from commerce_service.application.dto.comment import ListCommentsOptions
from commerce_service.application.dto.post import CreatePostDTO, ListPostsOptions
from commerce_service.application.dto.principal import Principal
from commerce_service.application.exceptions import (
    ErrorCode,
    StoreErrorKind,
    translate_store_errors,
)
from commerce_service.application.pagination import (
    Page,
    PaginationPolicy,
    SortKey,
    paginate,
    resolve_options,
    to_store_query,
)
from commerce_service.application.policies.permissions import assert_author
from commerce_service.application.uow import UnitOfWork
from commerce_service.domain.entities.post import Post
from commerce_service.domain.value_objects.enums import PostOrderBy
from commerce_service.services import comment_service

logger = logging.getLogger(__name__)

LISTING_POLICIES = {
    PostOrderBy.LIKE_COUNT_DESC: PaginationPolicy.keyset(SortKey("like_count"), SortKey("id")),
    PostOrderBy.CREATED_AT_DESC: PaginationPolicy.keyset(SortKey("created_at"), SortKey("id")),
}

_ERRORS = {StoreErrorKind.NOT_FOUND: ErrorCode.POST_NOT_FOUND}
_LIKE_ERRORS = {
    StoreErrorKind.NOT_FOUND: ErrorCode.POST_NOT_FOUND,
    StoreErrorKind.DUPLICATED: ErrorCode.POST_ALREADY_LIKED,
    StoreErrorKind.NOT_LIKED: ErrorCode.POST_NOT_LIKED,
}


async def get_post(post_id: uuid.UUID, with_comments: bool, uow: UnitOfWork) -> Post:
    with translate_store_errors(_ERRORS):
        post = await uow.posts.get(post_id)
    if not with_comments:
        return post

    # First page of top-level comments only.
    query = to_store_query(ListCommentsOptions(post_id=post.id), comment_service.LISTING_POLICY)
    comments = await uow.comments.list_comments(query)
    return dataclasses.replace(post, comments=tuple(comments))


async def create_post(data: CreatePostDTO, uow: UnitOfWork) -> Post:
    post = Post(
        id=uuid.uuid4(),
        title=data.title,
        content=data.content,
        like_count=0,
        author_id=data.user_id,
        created_at=datetime.now(timezone.utc),
    )
    post = await uow.posts_w.create(post)
    await uow.commit()
    return post


async def list_posts(
    next_key: str | None,
    raw: Mapping[str, Any],
    uow: UnitOfWork,
) -> Page[Post]:
    options = resolve_options(ListPostsOptions, next_key=next_key, raw=raw)
    return await paginate(options, LISTING_POLICIES[options.order_by], uow.posts.list_posts)


async def delete_post(post_id: uuid.UUID, principal: Principal, uow: UnitOfWork) -> None:
    """Soft-delete a post together with its comments. Only the author may do it."""
    with translate_store_errors(_ERRORS):
        post = await uow.posts.get(post_id)
    assert_author(principal, post.author_id)

    await uow.posts_w.soft_delete(post_id, datetime.now(timezone.utc))
    await uow.commit()
    logger.info("Post %s deleted by %s", post_id, principal.user_id)


async def like_post(post_id: uuid.UUID, principal: Principal, uow: UnitOfWork) -> None:
    with translate_store_errors(_LIKE_ERRORS):
        await uow.posts.get(post_id)
        await uow.posts_w.add_like(post_id, principal.user_id)
    await uow.commit()


async def unlike_post(post_id: uuid.UUID, principal: Principal, uow: UnitOfWork) -> None:
    with translate_store_errors(_LIKE_ERRORS):
        await uow.posts.get(post_id)
        await uow.posts_w.remove_like(post_id, principal.user_id)
    await uow.commit()
