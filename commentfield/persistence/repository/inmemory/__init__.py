"""In-memory store implementations."""

from .fieldtype import InMemoryCommentFieldtype
from .page import InMemoryPageRepository

__all__ = [
    "InMemoryCommentFieldtype",
    "InMemoryPageRepository",
]
