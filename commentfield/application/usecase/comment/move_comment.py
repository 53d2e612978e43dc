"""Move comment use case."""

import logfire
from pydantic import BaseModel

from commentfield.application.usecase.comment.get_comments import (
    CommentItem,
    comment_item,
)
from commentfield.domain.error import NotFoundError, ThreadingRejectedError
from commentfield.domain.repository import PageRepository
from commentfield.domain.service import CommentField
from commentfield.domain.value import CommentId, PageId


class MoveCommentRequest(BaseModel):
    """Move comment request."""

    page_id: int  # Page the comment is on now
    comment_id: int
    target_page_id: int


class MoveCommentUseCase:
    """Use case for moving a comment to another page."""

    def __init__(
        self,
        comment_field: CommentField,
        page_repository: PageRepository,
    ) -> None:
        self.comment_field = comment_field
        self.page_repository = page_repository

    def execute(self, request: MoveCommentRequest) -> CommentItem:
        """Execute move comment flow.

        Raises:
            NotFoundError: If the comment or the target page does not exist
            ThreadingRejectedError: If the comment may not live on the target page
        """
        comment = self.comment_field.get_comment_by_id(
            PageId(request.page_id), CommentId(request.comment_id)
        )
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        target = self.page_repository.find_by_id(PageId(request.target_page_id))
        if target is None:
            raise NotFoundError("Page", str(request.target_page_id))

        decision = self.comment_field.check_comment_page(comment, target)
        if not decision:
            raise ThreadingRejectedError(
                "Comment cannot be moved to this page", decision.reasons
            )

        if comment.page_id != target.id:
            self.comment_field.update_comment(
                PageId(request.page_id), comment, {"page_id": target.id}
            )
            logfire.info(
                "Comment moved",
                comment_id=comment.id,
                from_page_id=request.page_id,
                to_page_id=target.id,
            )

        moved = self.comment_field.get_comment_by_id(target.id, comment.id)
        if moved is None:
            raise NotFoundError("Comment", str(request.comment_id))
        return comment_item(self.comment_field, moved)
