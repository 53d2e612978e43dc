"""Domain value objects for comment fields."""

from enum import IntEnum

from commentfield.domain.value.common import ValueObject


class CommentStatus(IntEnum):
    """Moderation status of a comment.

    Ordered so that every status below DELETE is a live comment.
    """

    SPAM = -2
    PENDING = 0
    APPROVED = 1
    FEATURED = 2
    DELETE = 999


class ThreadingDecision(ValueObject):
    """Outcome of a threading check.

    ``reasons`` holds one human-readable message per violated rule; it is
    empty when ``allowed`` is true.
    """

    allowed: bool
    reasons: tuple[str, ...] = ()

    @classmethod
    def allow(cls) -> "ThreadingDecision":
        return cls(allowed=True)

    @classmethod
    def reject(cls, reason: str) -> "ThreadingDecision":
        return cls(allowed=False, reasons=(reason,))

    def __bool__(self) -> bool:
        return self.allowed
