from __future__ import annotations

import uuid

import pytest

from commerce_service.application.dto.post import CreatePostDTO
from commerce_service.application.exceptions import (
    ConflictError,
    ErrorCode,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from commerce_service.application.pagination import decode_next_key, encode_next_key
from commerce_service.services import post_service
from tests.conftest import make_comment, make_post


@pytest.mark.asyncio
async def test_create_post_commits(uow):
    post = await post_service.create_post(
        CreatePostDTO(title="Hello", content="World", user_id="user-1"), uow
    )
    assert post.author_id == "user-1"
    assert post.like_count == 0
    assert uow.store.posts[post.id] == post
    assert uow._committed is True


@pytest.mark.asyncio
async def test_get_post_with_top_level_comments(uow):
    post = uow.store.add_post(make_post())
    top = uow.store.add_comment(make_comment(post.id, minutes=1))
    uow.store.add_comment(make_comment(post.id, parent_id=top.id, minutes=2))

    plain = await post_service.get_post(post.id, False, uow)
    assert plain.comments is None

    detailed = await post_service.get_post(post.id, True, uow)
    assert [c.id for c in detailed.comments] == [top.id]


@pytest.mark.asyncio
async def test_get_missing_post(uow):
    with pytest.raises(NotFoundError) as exc_info:
        await post_service.get_post(uuid.uuid4(), False, uow)
    assert exc_info.value.code is ErrorCode.POST_NOT_FOUND


@pytest.mark.asyncio
async def test_list_by_like_count_pages_through_ties(uow):
    posts = [uow.store.add_post(make_post(like_count=5, minutes=i)) for i in range(4)]
    posts.append(uow.store.add_post(make_post(like_count=9)))

    first = await post_service.list_posts(None, {"limit": "2", "orderBy": "LIKE_DESC"}, uow)
    second = await post_service.list_posts(first.next_key, {}, uow)
    third = await post_service.list_posts(second.next_key, {}, uow)

    seen = [p.id for page in (first, second, third) for p in page.items]
    assert seen[0] == posts[-1].id
    assert len(seen) == len(set(seen)) == 5
    assert third.next_key is None


@pytest.mark.asyncio
async def test_list_filters_by_author(uow):
    mine = uow.store.add_post(make_post(author_id="me"))
    uow.store.add_post(make_post(author_id="someone-else"))

    page = await post_service.list_posts(None, {"orderBy": "CREATED_AT_DESC", "authorId": "me"}, uow)

    assert [p.id for p in page.items] == [mine.id]
    assert page.next_key is None


@pytest.mark.asyncio
async def test_next_key_from_full_page_decodes_to_last_id(uow):
    posts = [uow.store.add_post(make_post(minutes=i)) for i in range(3)]

    page = await post_service.list_posts(None, {"limit": "3", "orderBy": "CREATED_AT_DESC"}, uow)

    assert [p.id for p in page.items] == [p.id for p in reversed(posts)]
    assert decode_next_key(page.next_key) == {
        "limit": 3,
        "orderBy": "CREATED_AT_DESC",
        "cursor": str(posts[0].id),
    }


@pytest.mark.asyncio
async def test_rejected_token_never_reaches_store(uow):
    with pytest.raises(ValidationError) as exc_info:
        await post_service.list_posts("not-base64!!", {}, uow)
    assert exc_info.value.code is ErrorCode.INVALID_NEXT_KEY
    assert uow.store.queries == []


@pytest.mark.asyncio
async def test_out_of_range_limit_in_token(uow):
    token = encode_next_key({"limit": 999, "orderBy": "LIKE_DESC"})
    with pytest.raises(ValidationError) as exc_info:
        await post_service.list_posts(token, {}, uow)
    assert exc_info.value.code is ErrorCode.INVALID_NEXT_KEY


@pytest.mark.asyncio
async def test_delete_post_soft_deletes_comments(uow, principal):
    post = uow.store.add_post(make_post(author_id=principal.user_id))
    comment = uow.store.add_comment(make_comment(post.id))

    await post_service.delete_post(post.id, principal, uow)

    assert uow.store.posts[post.id].deleted_at is not None
    assert uow.store.comments[comment.id].deleted_at is not None
    with pytest.raises(NotFoundError):
        await post_service.get_post(post.id, False, uow)


@pytest.mark.asyncio
async def test_only_author_can_delete(uow, other_principal):
    post = uow.store.add_post(make_post(author_id="user-1"))

    with pytest.raises(ForbiddenError) as exc_info:
        await post_service.delete_post(post.id, other_principal, uow)

    assert exc_info.value.code is ErrorCode.NO_PERMISSION
    assert uow.store.posts[post.id].deleted_at is None
    assert uow._committed is False


@pytest.mark.asyncio
async def test_like_and_unlike(uow, principal):
    post = uow.store.add_post(make_post())

    await post_service.like_post(post.id, principal, uow)
    assert uow.store.posts[post.id].like_count == 1

    with pytest.raises(ConflictError) as exc_info:
        await post_service.like_post(post.id, principal, uow)
    assert exc_info.value.code is ErrorCode.POST_ALREADY_LIKED

    await post_service.unlike_post(post.id, principal, uow)
    assert uow.store.posts[post.id].like_count == 0

    with pytest.raises(ConflictError) as exc_info:
        await post_service.unlike_post(post.id, principal, uow)
    assert exc_info.value.code is ErrorCode.POST_NOT_LIKED


@pytest.mark.asyncio
async def test_like_missing_post(uow, principal):
    with pytest.raises(NotFoundError) as exc_info:
        await post_service.like_post(uuid.uuid4(), principal, uow)
    assert exc_info.value.code is ErrorCode.POST_NOT_FOUND
