from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, Response

from commerce_service.api.deps import CurrentPrincipal, UoWDep
from commerce_service.api.v1.schemas.comment import CommentResponse, CreateCommentRequest
from commerce_service.api.v1.schemas.common import PageResponse, raw_query, to_page_response
from commerce_service.application.dto.comment import CreateCommentDTO
from commerce_service.services import comment_service

router = APIRouter(prefix="/api/v1/comments", tags=["comments"])


@router.post("", response_model=CommentResponse, status_code=201)
async def create_comment(
    body: CreateCommentRequest,
    principal: CurrentPrincipal,
    uow: UoWDep,
) -> CommentResponse:
    dto = CreateCommentDTO(
        content=body.content,
        post_id=body.post_id,
        parent_id=body.parent_id,
        user_id=principal.user_id,
    )
    comment = await comment_service.create_comment(dto, uow)
    return CommentResponse.model_validate(comment)


@router.get("", response_model=PageResponse[CommentResponse])
async def list_comments(
    uow: UoWDep,
    next_key: str | None = Query(None, alias="nextKey"),
    limit: str | None = Query(None),
    post_id: str | None = Query(None, alias="postId"),
    parent_id: str | None = Query(None, alias="parentId"),
) -> PageResponse[CommentResponse]:
    raw = raw_query(limit=limit, post_id=post_id, parent_id=parent_id)
    page = await comment_service.list_comments(next_key, raw, uow)
    return to_page_response(page, CommentResponse)


@router.delete("/{comment_id}", status_code=204)
async def delete_comment(comment_id: UUID, principal: CurrentPrincipal, uow: UoWDep) -> Response:
    await comment_service.delete_comment(comment_id, principal, uow)
    return Response(status_code=204)
