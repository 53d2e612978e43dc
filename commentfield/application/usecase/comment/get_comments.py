"""Get comments use cases."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from commentfield.domain.error import NotFoundError
from commentfield.domain.model.comment import Comment
from commentfield.domain.model.comment_array import CommentArray
from commentfield.domain.service import CommentField
from commentfield.domain.value import CommentId, CommentStatus, PageId


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: int
    page_id: int | None
    parent_id: int
    status: CommentStatus
    text: str
    cite: str
    website: str
    upvotes: int
    downvotes: int
    stars: int
    depth: int
    created: datetime

    @classmethod
    def from_comment(cls, comment: Comment, depth: int = 0) -> "CommentItem":
        return cls(
            comment_id=comment.id,
            page_id=comment.page_id,
            parent_id=comment.parent_id,
            status=comment.status,
            text=comment.text,
            cite=comment.cite,
            website=comment.website,
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            stars=comment.stars,
            depth=depth,
            created=comment.created,
        )


def comment_item(comment_field: CommentField, comment: Comment) -> CommentItem:
    """Build a response item, computing depth from the comment's page."""
    depth = 0
    if comment.page_id is not None:
        page_comments = comment_field.page_comments(comment.page_id)
        if page_comments:
            depth = page_comments.depth(comment)
    return CommentItem.from_comment(comment, depth)


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    page_id: int | None = None  # Restrict to one page
    selector: str = ""
    start: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for listing comments that match a selector."""

    def __init__(self, comment_field: CommentField) -> None:
        """Initialize get comments use case.

        Args:
            comment_field: Comments field
        """
        self.comment_field = comment_field

    def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        ``total`` counts every match, ignoring ``start`` and ``limit``.

        Raises:
            ValidationError: If the selector is malformed
        """
        selector = request.selector
        if request.page_id is not None:
            selector = f"page={request.page_id}, {selector}"

        options: dict[str, int] = {"start": request.start}
        if request.limit is not None:
            options["limit"] = request.limit

        with logfire.span("get_comments", selector=selector):
            comments = self.comment_field.find(selector, options)
            total = self.comment_field.count(selector)

        # One collection per page is enough to compute every depth
        collections: dict[PageId, CommentArray | None] = {}
        items = []
        for comment in comments:
            depth = 0
            if comment.page_id is not None:
                if comment.page_id not in collections:
                    collections[comment.page_id] = self.comment_field.page_comments(
                        comment.page_id
                    )
                page_comments = collections[comment.page_id]
                if page_comments:
                    depth = page_comments.depth(comment)
            items.append(CommentItem.from_comment(comment, depth))

        return GetCommentsResponse(comments=items, total=total)


class GetCommentRequest(BaseModel):
    """Get a single comment by id or by code."""

    page_id: int
    comment_id: int | None = None
    code: str | None = None


class GetCommentUseCase:
    """Use case for fetching a single comment."""

    def __init__(self, comment_field: CommentField) -> None:
        self.comment_field = comment_field

    def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If no comment matches
        """
        page_id = PageId(request.page_id)
        if request.code:
            comment = self.comment_field.get_comment_by_code(page_id, request.code)
            identifier = "code"
        else:
            comment = self.comment_field.get_comment_by_id(
                page_id, CommentId(request.comment_id or 0)
            )
            identifier = str(request.comment_id)

        if comment is None:
            raise NotFoundError("Comment", identifier)
        return comment_item(self.comment_field, comment)


class CountCommentsRequest(BaseModel):
    """Count comments request."""

    selector: str = ""


class CountCommentsResponse(BaseModel):
    """Count comments response."""

    selector: str
    count: int


class CountCommentsUseCase:
    """Use case for counting comments that match a selector."""

    def __init__(self, comment_field: CommentField) -> None:
        self.comment_field = comment_field

    def execute(self, request: CountCommentsRequest) -> CountCommentsResponse:
        count = self.comment_field.count(request.selector)
        return CountCommentsResponse(selector=request.selector, count=count)
