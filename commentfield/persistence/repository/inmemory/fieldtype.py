"""In-memory comments fieldtype."""

import secrets
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional

import logfire
import pydantic

from commentfield.config import CommentFieldSettings
from commentfield.domain.error import ValidationError
from commentfield.domain.model.comment import Comment
from commentfield.domain.model.comment_array import CommentArray
from commentfield.domain.repository.fieldtype import CommentFieldtype
from commentfield.domain.value import CommentId, CommentStatus, PageId
from commentfield.persistence.selector import Selector

# Properties callers may change through update_comment
UPDATABLE_PROPERTIES = frozenset(
    {
        "parent_id",
        "page_id",
        "status",
        "text",
        "cite",
        "email",
        "website",
        "stars",
        "upvotes",
        "downvotes",
    }
)


class InMemoryCommentFieldtype(CommentFieldtype):
    """In-memory implementation of CommentFieldtype.

    Comments are kept per (field name, page id) in insertion order, which is
    also creation order.
    """

    def __init__(self) -> None:
        self._comments: dict[tuple[str, PageId], list[Comment]] = {}
        self._votes: set[tuple[str, CommentId, str]] = set()
        self._next_id = 1

    def find(
        self,
        selector: str,
        field: CommentFieldSettings,
        options: Optional[Mapping[str, Any]] = None,
    ) -> list[Comment]:
        """Find comments of a field across all pages.

        ``options`` may carry ``start`` and ``limit``, which take precedence
        over the same terms in the selector. Without a ``sort`` term comments
        come in collection order, newest first when the field says so.
        """
        parsed = Selector.parse(selector)
        options = options or {}
        if "start" in options:
            parsed.start = int(options["start"])
        if "limit" in options:
            parsed.limit = int(options["limit"])
        comments = self._field_comments(field)
        if field.sort_newest:
            comments.reverse()
        return parsed.apply(comments)

    def count(self, selector: str, field: CommentFieldSettings) -> int:
        """Count comments matching a selector, ignoring pagination."""
        parsed = Selector.parse(selector)
        return sum(1 for c in self._field_comments(field) if parsed.matches(c))

    def get_comment_by_code(
        self, page_id: PageId, field: CommentFieldSettings, code: str
    ) -> Optional[Comment]:
        """Find a comment on a page by code or subcode."""
        if not code:
            return None
        for comment in self._comments.get((field.name, page_id), []):
            if code in (comment.code, comment.subcode):
                return comment
        return None

    def get_comment_by_id(
        self, page_id: PageId, field: CommentFieldSettings, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment on a page by ID."""
        for comment in self._comments.get((field.name, page_id), []):
            if comment.id == comment_id:
                return comment
        return None

    def page_comments(
        self, page_id: PageId, field: CommentFieldSettings
    ) -> Optional[CommentArray]:
        """Return a page's comments, newest first when the field says so."""
        comments = self._comments.get((field.name, page_id))
        if comments is None:
            return None
        items = tuple(reversed(comments)) if field.sort_newest else tuple(comments)
        return CommentArray(page_id=page_id, field_name=field.name, items=items)

    def add_comment(
        self, page_id: PageId, field: CommentFieldSettings, comment: Comment
    ) -> Comment:
        """Store a new comment, assigning id, codes and initial status."""
        with logfire.span(
            "inmemory_fieldtype.add_comment",
            page_id=page_id,
            field=field.name,
            parent_id=comment.parent_id,
        ):
            self._purge_spam(field)

            saved = comment.model_copy(
                update={
                    "id": CommentId(self._next_id),
                    "page_id": page_id,
                    "field_name": field.name,
                    "status": self._initial_status(field, comment),
                    "code": comment.code or secrets.token_urlsafe(48),
                    "subcode": comment.subcode or secrets.token_urlsafe(24),
                }
            )
            self._next_id += 1
            self._comments.setdefault((field.name, page_id), []).append(saved)

            logfire.info(
                "Comment added",
                comment_id=saved.id,
                page_id=page_id,
                status=saved.status.name,
            )
            return saved

    def update_comment(
        self,
        page_id: PageId,
        field: CommentFieldSettings,
        comment: Comment,
        properties: Mapping[str, Any],
    ) -> bool:
        """Update properties of a stored comment.

        Changing ``page_id`` moves the comment to the end of the target
        page's collection.

        Raises:
            ValidationError: If a property is unknown or its value is invalid
        """
        unknown = set(properties) - UPDATABLE_PROPERTIES
        if unknown:
            raise ValidationError(
                f"Cannot update comment properties: {', '.join(sorted(unknown))}"
            )

        stored = self.get_comment_by_id(page_id, field, comment.id)
        if stored is None:
            logfire.warn(
                "Comment not found for update", comment_id=comment.id, page_id=page_id
            )
            return False

        try:
            updated = Comment.model_validate({**stored.model_dump(), **properties})
        except pydantic.ValidationError as e:
            raise ValidationError(str(e)) from e

        source = self._comments[(field.name, page_id)]
        if updated.page_id == page_id:
            source[source.index(stored)] = updated
        else:
            source.remove(stored)
            self._comments.setdefault((field.name, updated.page_id), []).append(updated)

        logfire.info(
            "Comment updated",
            comment_id=comment.id,
            page_id=page_id,
            properties=sorted(properties),
        )
        return True

    def delete_comment(
        self,
        page_id: PageId,
        field: CommentFieldSettings,
        comment: Comment,
        notes: str = "",
    ) -> bool:
        """Remove a comment from its page."""
        stored = self.get_comment_by_id(page_id, field, comment.id)
        if stored is None:
            return False
        self._comments[(field.name, page_id)].remove(stored)
        logfire.info(
            "Comment deleted", comment_id=comment.id, page_id=page_id, notes=notes
        )
        return True

    def vote_comment(
        self,
        page_id: PageId,
        field: CommentFieldSettings,
        comment: Comment,
        up: bool = True,
        voter: str = "",
    ) -> bool:
        """Count one vote per voter per comment."""
        if not field.use_votes:
            return False
        if not up and field.use_votes < 2:
            return False

        key = (field.name, comment.id, voter)
        if key in self._votes:
            logfire.info("Duplicate vote ignored", comment_id=comment.id)
            return False

        stored = self.get_comment_by_id(page_id, field, comment.id)
        if stored is None:
            return False

        if up:
            changes = {"upvotes": stored.upvotes + 1}
        else:
            changes = {"downvotes": stored.downvotes + 1}
        comments = self._comments[(field.name, page_id)]
        comments[comments.index(stored)] = stored.model_copy(update=changes)
        self._votes.add(key)
        return True

    def _field_comments(self, field: CommentFieldSettings) -> list[Comment]:
        return [
            comment
            for (field_name, _), comments in self._comments.items()
            if field_name == field.name
            for comment in comments
        ]

    def _initial_status(
        self, field: CommentFieldSettings, comment: Comment
    ) -> CommentStatus:
        """Apply the field's moderation setting to a new pending comment."""
        if comment.status != CommentStatus.PENDING:
            return comment.status
        if field.moderate == 0:
            return CommentStatus.APPROVED
        if field.moderate == 2 and comment.email:
            known_author = any(
                c.email == comment.email and c.status >= CommentStatus.APPROVED
                for c in self._field_comments(field)
            )
            if known_author:
                return CommentStatus.APPROVED
        return CommentStatus.PENDING

    def _purge_spam(self, field: CommentFieldSettings) -> None:
        """Drop spam older than the field's ``delete_spam_days``."""
        cutoff = datetime.now() - timedelta(days=field.delete_spam_days)
        for key, comments in list(self._comments.items()):
            if key[0] != field.name:
                continue
            kept = [
                c
                for c in comments
                if not (c.status == CommentStatus.SPAM and c.created < cutoff)
            ]
            if len(kept) != len(comments):
                logfire.info(
                    "Expired spam removed",
                    page_id=key[1],
                    count=len(comments) - len(kept),
                )
                self._comments[key] = kept
