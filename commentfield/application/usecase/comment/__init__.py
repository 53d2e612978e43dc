"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    CommentItem,
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
)
from .move_comment import MoveCommentRequest, MoveCommentUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase
from .vote_comment import VoteCommentRequest, VoteCommentResponse, VoteCommentUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentItem",
    "CountCommentsRequest",
    "CountCommentsResponse",
    "CountCommentsUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "MoveCommentRequest",
    "MoveCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
    "VoteCommentRequest",
    "VoteCommentResponse",
    "VoteCommentUseCase",
]
