"""Repository interfaces for comment fields.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from commentfield.domain.repository.fieldtype import CommentFieldtype
from commentfield.domain.repository.page import PageRepository

__all__ = [
    "CommentFieldtype",
    "PageRepository",
]
