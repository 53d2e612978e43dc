"""Store implementations of the domain repository interfaces."""

from .inmemory import InMemoryCommentFieldtype, InMemoryPageRepository

__all__ = [
    "InMemoryCommentFieldtype",
    "InMemoryPageRepository",
]
