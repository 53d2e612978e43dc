"""Add comment use case."""

import logfire
from pydantic import BaseModel, Field

from commentfield.application.usecase.comment.get_comments import (
    CommentItem,
    comment_item,
)
from commentfield.domain.error import NotFoundError, ThreadingRejectedError
from commentfield.domain.model.comment import Comment
from commentfield.domain.repository import PageRepository
from commentfield.domain.service import CommentField
from commentfield.domain.value import CommentId, PageId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    page_id: int
    text: str = Field(min_length=1, max_length=10000)
    cite: str = Field(min_length=1, max_length=128)
    email: str = ""
    website: str = ""
    parent_id: int = 0  # Parent comment ID for replies
    stars: int = Field(default=0, ge=0, le=5)
    ip: str = ""
    user_agent: str = ""


class AddCommentUseCase:
    """Use case for posting a comment on a page or replying to another comment."""

    def __init__(
        self,
        comment_field: CommentField,
        page_repository: PageRepository,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_field: Comments field
            page_repository: Page lookup
        """
        self.comment_field = comment_field
        self.page_repository = page_repository

    def execute(self, request: AddCommentRequest) -> CommentItem:
        """Execute add comment flow.

        Steps:
        1. Verify the page exists
        2. Check the comment may live on the page
        3. Check the requested parent (replies only)
        4. Store the comment through the field

        Raises:
            NotFoundError: If the page does not exist
            ThreadingRejectedError: If the page or parent is not allowed
        """
        page = self.page_repository.find_by_id(PageId(request.page_id))
        if page is None:
            raise NotFoundError("Page", str(request.page_id))

        stars = request.stars if self.comment_field.settings.use_stars else 0
        draft = Comment(
            parent_id=CommentId(request.parent_id),
            field_name=self.comment_field.name,
            text=request.text,
            cite=request.cite,
            email=request.email,
            website=request.website,
            stars=stars,
            ip=request.ip,
            user_agent=request.user_agent,
        )

        with logfire.span(
            "add_comment", page_id=page.id, parent_id=request.parent_id
        ):
            decision = self.comment_field.check_comment_page(draft, page)
            if not decision:
                raise ThreadingRejectedError(
                    "Comment cannot be added to this page", decision.reasons
                )

            # The parent is looked up on the comment's page
            placed = draft.model_copy(update={"page_id": page.id})
            decision = self.comment_field.check_comment_parent_id(
                placed, request.parent_id
            )
            if not decision:
                raise ThreadingRejectedError(
                    "Comment cannot reply to this comment", decision.reasons
                )

            saved = self.comment_field.add_comment(page.id, placed)
            return comment_item(self.comment_field, saved)
