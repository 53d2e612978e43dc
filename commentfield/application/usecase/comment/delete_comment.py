"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from commentfield.domain.error import BusinessRuleViolationError, NotFoundError
from commentfield.domain.service import CommentField
from commentfield.domain.value import CommentId, PageId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    page_id: int
    comment_id: int
    notes: str = ""


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting a comment that has no live replies."""

    def __init__(self, comment_field: CommentField) -> None:
        self.comment_field = comment_field

    def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist on the page
            BusinessRuleViolationError: If the comment still has live replies
        """
        page_id = PageId(request.page_id)
        comment = self.comment_field.get_comment_by_id(
            page_id, CommentId(request.comment_id)
        )
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        if not self.comment_field.allow_delete_comment(comment):
            logfire.warn("Comment delete refused", comment_id=comment.id)
            raise BusinessRuleViolationError(
                f"Comment {comment.id} has replies and cannot be deleted"
            )

        deleted = self.comment_field.delete_comment(page_id, comment, request.notes)
        return DeleteCommentResponse(comment_id=comment.id, deleted=deleted)
