"""Domain model entities for comment fields."""

from commentfield.domain.model.comment import Comment
from commentfield.domain.model.comment_array import CommentArray
from commentfield.domain.model.page import Page

__all__ = [
    "Comment",
    "CommentArray",
    "Page",
]
