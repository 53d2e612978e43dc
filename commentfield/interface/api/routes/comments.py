"""Comment routes.

Domain errors raised by the use cases are turned into HTTP responses by the
handlers in ``commentfield.interface.api.errors``.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel, Field

from commentfield.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentItem,
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
    MoveCommentRequest,
    MoveCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
    VoteCommentRequest,
    VoteCommentResponse,
    VoteCommentUseCase,
)

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for posting a comment."""

    text: str = Field(min_length=1, max_length=10000)
    cite: str = Field(min_length=1, max_length=128)
    email: str = ""
    website: str = ""
    parent_id: int = 0  # Parent comment ID for replies
    stars: int = Field(default=0, ge=0, le=5)


@router.post(
    "/pages/{page_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    page_id: int,
    request: AddCommentAPIRequest,
    http_request: Request,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> CommentItem:
    """Post a comment on a page or reply to another comment.

    Returns 409 with the rejection reasons when the reply is not allowed.
    """
    return add_comment_use_case.execute(
        AddCommentRequest(
            page_id=page_id,
            text=request.text,
            cite=request.cite,
            email=request.email,
            website=request.website,
            parent_id=request.parent_id,
            stars=request.stars,
            ip=http_request.client.host if http_request.client else "",
            user_agent=http_request.headers.get("user-agent", ""),
        )
    )


@router.get("/pages/{page_id}/comments", response_model=GetCommentsResponse)
async def get_page_comments(
    page_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    selector: str = "",
    start: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=1),
) -> GetCommentsResponse:
    """List comments of a page, optionally narrowed by a selector."""
    return get_comments_use_case.execute(
        GetCommentsRequest(page_id=page_id, selector=selector, start=start, limit=limit)
    )


@router.get("/pages/{page_id}/comments/by-code/{code}", response_model=CommentItem)
async def get_comment_by_code(
    page_id: int,
    code: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a comment by its code or subcode."""
    return get_comment_use_case.execute(GetCommentRequest(page_id=page_id, code=code))


@router.get("/pages/{page_id}/comments/{comment_id}", response_model=CommentItem)
async def get_comment(
    page_id: int,
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a comment by ID."""
    return get_comment_use_case.execute(
        GetCommentRequest(page_id=page_id, comment_id=comment_id)
    )


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating comment properties."""

    properties: dict[str, Any]


@router.patch("/pages/{page_id}/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    page_id: int,
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentItem:
    """Update comment properties, e.g. status, text or parent."""
    return update_comment_use_case.execute(
        UpdateCommentRequest(
            page_id=page_id, comment_id=comment_id, properties=request.properties
        )
    )


class MoveCommentAPIRequest(BaseModel):
    """API request for moving a comment to another page."""

    target_page_id: int


@router.post(
    "/pages/{page_id}/comments/{comment_id}/move", response_model=CommentItem
)
async def move_comment(
    page_id: int,
    comment_id: int,
    request: MoveCommentAPIRequest,
    move_comment_use_case: FromDishka[MoveCommentUseCase],
) -> CommentItem:
    """Move a comment to another page."""
    return move_comment_use_case.execute(
        MoveCommentRequest(
            page_id=page_id,
            comment_id=comment_id,
            target_page_id=request.target_page_id,
        )
    )


@router.delete(
    "/pages/{page_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    page_id: int,
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    notes: str = "",
) -> DeleteCommentResponse:
    """Delete a comment; refused with 409 while it has live replies."""
    return delete_comment_use_case.execute(
        DeleteCommentRequest(page_id=page_id, comment_id=comment_id, notes=notes)
    )


class VoteCommentAPIRequest(BaseModel):
    """API request for voting on a comment."""

    up: bool = True


@router.post(
    "/pages/{page_id}/comments/{comment_id}/vote", response_model=VoteCommentResponse
)
async def vote_comment(
    page_id: int,
    comment_id: int,
    request: VoteCommentAPIRequest,
    http_request: Request,
    vote_comment_use_case: FromDishka[VoteCommentUseCase],
) -> VoteCommentResponse:
    """Vote on a comment. One vote per client address."""
    voter = http_request.client.host if http_request.client else ""
    return vote_comment_use_case.execute(
        VoteCommentRequest(
            page_id=page_id, comment_id=comment_id, up=request.up, voter=voter
        )
    )


@router.get("/comments", response_model=GetCommentsResponse)
async def find_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    selector: str = "",
    start: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=1),
) -> GetCommentsResponse:
    """Find comments across all pages."""
    return get_comments_use_case.execute(
        GetCommentsRequest(selector=selector, start=start, limit=limit)
    )


@router.get("/comments/count", response_model=CountCommentsResponse)
async def count_comments(
    count_comments_use_case: FromDishka[CountCommentsUseCase],
    selector: str = "",
) -> CountCommentsResponse:
    """Count comments across all pages."""
    return count_comments_use_case.execute(CountCommentsRequest(selector=selector))
