from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, Response

from commerce_service.api.deps import CurrentPrincipal, UoWDep
from commerce_service.api.v1.schemas.common import PageResponse, raw_query, to_page_response
from commerce_service.api.v1.schemas.post import CreatePostRequest, PostResponse
from commerce_service.application.dto.post import CreatePostDTO
from commerce_service.services import post_service

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: UUID,
    uow: UoWDep,
    with_comments: bool = Query(False, alias="withComments"),
) -> PostResponse:
    post = await post_service.get_post(post_id, with_comments, uow)
    return PostResponse.model_validate(post)


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(
    body: CreatePostRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> PostResponse:
    post = await post_service.create_post(
        CreatePostDTO(title=body.title, content=body.content, user_id=principal.user_id),
        uow,
    )
    return PostResponse.model_validate(post)


@router.get("", response_model=PageResponse[PostResponse])
async def list_posts(
    uow: UoWDep,
    next_key: str | None = Query(None, alias="nextKey"),
    limit: str | None = Query(None),
    order_by: str | None = Query(None, alias="orderBy", description="LIKE_DESC or CREATED_AT_DESC"),
    author_id: str | None = Query(None, alias="authorId"),
) -> PageResponse[PostResponse]:
    raw = raw_query(limit=limit, order_by=order_by, author_id=author_id)
    page = await post_service.list_posts(next_key, raw, uow)
    return to_page_response(page, PostResponse)


@router.delete("/{post_id}", status_code=204)
async def delete_post(post_id: UUID, principal: CurrentPrincipal, uow: UoWDep) -> Response:
    await post_service.delete_post(post_id, principal, uow)
    return Response(status_code=204)


@router.put("/like/{post_id}", status_code=204)
async def like_post(post_id: UUID, principal: CurrentPrincipal, uow: UoWDep) -> Response:
    await post_service.like_post(post_id, principal, uow)
    return Response(status_code=204)


@router.delete("/like/{post_id}", status_code=204)
async def unlike_post(post_id: UUID, principal: CurrentPrincipal, uow: UoWDep) -> Response:
    await post_service.unlike_post(post_id, principal, uow)
    return Response(status_code=204)
