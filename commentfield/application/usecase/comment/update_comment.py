"""Update comment use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from commentfield.application.usecase.comment.get_comments import (
    CommentItem,
    comment_item,
)
from commentfield.domain.error import (
    NotFoundError,
    ThreadingRejectedError,
    ValidationError,
)
from commentfield.domain.service import CommentField
from commentfield.domain.value import CommentId, PageId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    page_id: int
    comment_id: int
    properties: dict[str, Any]


class UpdateCommentUseCase:
    """Use case for changing properties of a comment, including its parent."""

    def __init__(self, comment_field: CommentField) -> None:
        """Initialize update comment use case.

        Args:
            comment_field: Comments field
        """
        self.comment_field = comment_field

    def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        A new ``parent_id`` must pass the field's threading rules before
        anything is written.

        Raises:
            NotFoundError: If the comment does not exist on the page
            ValidationError: If properties are empty or try to change the page
            ThreadingRejectedError: If the new parent is not allowed
        """
        page_id = PageId(request.page_id)
        comment_id = CommentId(request.comment_id)

        if not request.properties:
            raise ValidationError("No properties to update")
        if "page_id" in request.properties:
            raise ValidationError("Use the move operation to change a comment's page")

        comment = self.comment_field.get_comment_by_id(page_id, comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        if "parent_id" in request.properties:
            try:
                parent_id = int(request.properties["parent_id"])
            except (TypeError, ValueError):
                raise ValidationError("parent_id must be an integer") from None
            if parent_id != comment.parent_id:
                decision = self.comment_field.check_comment_parent_id(
                    comment, parent_id
                )
                if not decision:
                    logfire.warn(
                        "Comment parent change rejected",
                        comment_id=comment.id,
                        parent_id=parent_id,
                        reasons=list(decision.reasons),
                    )
                    raise ThreadingRejectedError(
                        "Comment cannot reply to this comment", decision.reasons
                    )

        if not self.comment_field.update_comment(page_id, comment, request.properties):
            raise NotFoundError("Comment", str(request.comment_id))

        updated = self.comment_field.get_comment_by_id(page_id, comment_id)
        if updated is None:
            raise NotFoundError("Comment", str(request.comment_id))
        return comment_item(self.comment_field, updated)
