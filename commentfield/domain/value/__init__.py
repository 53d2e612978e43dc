"""Domain value objects for comment fields."""

from commentfield.domain.value.identifiers import CommentId, PageId
from commentfield.domain.value.types import CommentStatus, ThreadingDecision

__all__ = [
    # Identifiers
    "CommentId",
    "PageId",
    # Types
    "CommentStatus",
    "ThreadingDecision",
]
