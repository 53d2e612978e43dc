"""Comments field domain service."""

from collections.abc import Callable
from typing import Any, Mapping, Optional

import logfire

from commentfield.config import CommentFieldSettings
from commentfield.domain.model.comment import Comment
from commentfield.domain.model.comment_array import CommentArray
from commentfield.domain.model.page import Page
from commentfield.domain.repository import CommentFieldtype
from commentfield.domain.value import CommentId, CommentStatus, PageId, ThreadingDecision

from .base import Service

DiagnosticSink = Callable[[str], None]


def report_to_logfire(message: str) -> None:
    """Default sink for verbose rejection reasons."""
    logfire.warn("Comment threading rejected: {reason}", reason=message)


class CommentField(Service):
    """A configured comments field.

    Wraps the field settings and the comments fieldtype. Storage, lookup and
    voting go straight to the fieldtype; the threading rules (where a comment
    may be replied to, which page it may live on, whether it may be deleted)
    are decided here from already loaded comment collections.
    """

    def __init__(
        self,
        settings: CommentFieldSettings,
        fieldtype: CommentFieldtype,
        report: Optional[DiagnosticSink] = None,
    ) -> None:
        """Initialize comments field.

        Args:
            settings: Field configuration (name, max depth, ...)
            fieldtype: Comment store the field delegates to
            report: Receives one message per rejection when a check runs
                verbose; defaults to a logfire warning
        """
        self.settings = settings
        self.fieldtype = fieldtype
        self.report = report or report_to_logfire

    @property
    def name(self) -> str:
        return self.settings.name

    @property
    def max_depth(self) -> int:
        return self.settings.depth

    def __str__(self) -> str:
        return self.name

    # -- delegation to the fieldtype ------------------------------------

    def find(
        self, selector: str, options: Optional[Mapping[str, Any]] = None
    ) -> list[Comment]:
        """Find comments matching given selector."""
        return self.fieldtype.find(selector, self.settings, options)

    def count(self, selector: str) -> int:
        """Return total quantity of comments matching the selector."""
        return self.fieldtype.count(selector, self.settings)

    def get_comment_by_code(self, page_id: PageId, code: str) -> Optional[Comment]:
        """Given a comment code or subcode, return the comment or None."""
        return self.fieldtype.get_comment_by_code(page_id, self.settings, code)

    def get_comment_by_id(
        self, page_id: PageId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Get a comment by ID or None if not found."""
        return self.fieldtype.get_comment_by_id(page_id, self.settings, comment_id)

    def page_comments(self, page_id: PageId) -> Optional[CommentArray]:
        return self.fieldtype.page_comments(page_id, self.settings)

    def add_comment(self, page_id: PageId, comment: Comment) -> Comment:
        return self.fieldtype.add_comment(page_id, self.settings, comment)

    def update_comment(
        self, page_id: PageId, comment: Comment, properties: Mapping[str, Any]
    ) -> bool:
        """Update specific properties for a comment."""
        return self.fieldtype.update_comment(
            page_id, self.settings, comment, properties
        )

    def delete_comment(self, page_id: PageId, comment: Comment, notes: str = "") -> bool:
        """Delete a given comment."""
        return self.fieldtype.delete_comment(page_id, self.settings, comment, notes)

    def vote_comment(
        self, page_id: PageId, comment: Comment, up: bool = True, voter: str = ""
    ) -> bool:
        """Add a vote to the comment; False on failure or duplicate."""
        return self.fieldtype.vote_comment(
            page_id, self.settings, comment, up, voter
        )

    # -- threading rules ------------------------------------------------

    def allow_comment_parent(
        self, comment: Comment, parent: Comment, verbose: bool = False
    ) -> bool:
        """Allow given comment to have given parent comment?"""
        return self.allow_comment_parent_id(comment, parent.id, verbose)

    def allow_comment_parent_id(
        self, comment: Comment, parent_id: int, verbose: bool = False
    ) -> bool:
        """Allow given comment to have the comment with ``parent_id`` as parent?

        Args:
            comment: Comment being placed
            parent_id: Candidate parent; 0 means no parent
            verbose: Send the rejection reason to the diagnostic sink
        """
        decision = self.check_comment_parent_id(comment, parent_id)
        return self._conclude(decision, verbose)

    def check_comment_parent(
        self, comment: Comment, parent: Comment
    ) -> ThreadingDecision:
        return self.check_comment_parent_id(comment, parent.id)

    def check_comment_parent_id(
        self, comment: Comment, parent_id: int
    ) -> ThreadingDecision:
        """Decide whether ``comment`` may be a reply to ``parent_id``.

        Rules are applied in order and the first failure wins:
        same field, not its own parent, threading enabled, parent present on
        the comment's page, parent below the max depth, and parent not
        already one of the comment's descendants.
        """
        parent_id = int(parent_id)
        if parent_id == 0:
            # comment with no parent is always allowed
            return ThreadingDecision.allow()

        error = f"Comment {comment.id} cannot be reply-to comment {parent_id}:"
        field_name = comment.field_name or self.name

        if field_name != self.name:
            return ThreadingDecision.reject(
                f"{error} Comments cannot be moved between fields "
                f"({field_name} != {self.name})"
            )

        if parent_id == comment.id:
            return ThreadingDecision.reject(
                f"{error} Comment cannot be its own parent"
            )

        max_depth = self.max_depth
        if not max_depth:
            return ThreadingDecision.reject(
                f"{error} Comment depth is not enabled in field settings"
            )

        page_comments = (
            self.page_comments(comment.page_id) if comment.page_id is not None else None
        )
        parent = page_comments.get(parent_id) if page_comments else None
        if parent is None:
            return ThreadingDecision.reject(
                f"{error} Page {comment.page_id} does not have parent comment {parent_id}"
            )

        if page_comments.depth(parent) >= max_depth:
            return ThreadingDecision.reject(
                f"{error} Exceeds max allowed depth setting ({max_depth})"
            )

        if page_comments.has_child(comment.id, parent_id, recursive=True):
            return ThreadingDecision.reject(
                f"{error} Comment {parent_id} is already a child of comment {comment.id}"
            )

        return ThreadingDecision.allow()

    def allow_comment_page(
        self, comment: Comment, page: Page, verbose: bool = False
    ) -> bool:
        """Allow given comment to live on given page?"""
        decision = self.check_comment_page(comment, page)
        return self._conclude(decision, verbose)

    def check_comment_page(self, comment: Comment, page: Page) -> ThreadingDecision:
        """Decide whether ``comment`` may live on ``page``.

        A comment already on the page is always allowed there. Otherwise a
        reply may only move to a page that already holds its parent.
        """
        error = f"Comment {comment.id} cannot be on page {page.id}:"
        field_name = comment.field_name or self.name

        if not page.has_field(field_name):
            return ThreadingDecision.reject(
                f"{error} Page does not have field: {field_name}"
            )

        if comment.page_id is not None and comment.page_id == page.id:
            return ThreadingDecision.allow()

        parent_id = comment.parent_id
        if parent_id:
            page_comments = self._field_page_comments(page.id, field_name)
            if not page_comments or not page_comments.has_comment(parent_id):
                return ThreadingDecision.reject(
                    f"{error} Comment has parent comment {parent_id} "
                    f"which does not exist on page {page.id}"
                )

        return ThreadingDecision.allow()

    def allow_delete_comment(self, comment: Comment) -> bool:
        """May the given comment be deleted?

        Only while none of its replies is a saved, live comment.
        """
        for child in self.comment_children(comment):
            if child.id > 0 and child.status < CommentStatus.DELETE:
                return False
        return True

    def comment_children(self, comment: Comment) -> list[Comment]:
        """Direct replies to a comment, from the comment's own page."""
        if comment.page_id is None:
            return []
        page_comments = self.page_comments(comment.page_id)
        if not page_comments:
            return []
        return page_comments.children(comment.id)

    def _field_page_comments(
        self, page_id: PageId, field_name: str
    ) -> Optional[CommentArray]:
        """Comments of the named field on a page, which may be another field."""
        if field_name == self.name:
            return self.page_comments(page_id)
        settings = self.settings.model_copy(update={"name": field_name})
        return self.fieldtype.page_comments(page_id, settings)

    def _conclude(self, decision: ThreadingDecision, verbose: bool) -> bool:
        if verbose:
            for reason in decision.reasons:
                self.report(reason)
        return decision.allowed
