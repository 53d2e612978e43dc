"""Vote comment use case."""

from pydantic import BaseModel

from commentfield.domain.error import NotFoundError
from commentfield.domain.service import CommentField
from commentfield.domain.value import CommentId, PageId


class VoteCommentRequest(BaseModel):
    """Vote comment request."""

    page_id: int
    comment_id: int
    up: bool = True
    voter: str  # User name or IP address


class VoteCommentResponse(BaseModel):
    """Vote comment response."""

    comment_id: int
    counted: bool  # False when voting is disabled or the vote is a duplicate
    upvotes: int
    downvotes: int


class VoteCommentUseCase:
    """Use case for upvoting or downvoting a comment."""

    def __init__(self, comment_field: CommentField) -> None:
        self.comment_field = comment_field

    def execute(self, request: VoteCommentRequest) -> VoteCommentResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the comment does not exist on the page
        """
        page_id = PageId(request.page_id)
        comment_id = CommentId(request.comment_id)

        comment = self.comment_field.get_comment_by_id(page_id, comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        counted = self.comment_field.vote_comment(
            page_id, comment, up=request.up, voter=request.voter
        )

        current = self.comment_field.get_comment_by_id(page_id, comment_id) or comment
        return VoteCommentResponse(
            comment_id=current.id,
            counted=counted,
            upvotes=current.upvotes,
            downvotes=current.downvotes,
        )
