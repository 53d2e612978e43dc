"""Test configuration and helpers."""

from commentfield.config import CommentFieldSettings
from commentfield.domain.model.comment import Comment
from commentfield.domain.model.page import Page
from commentfield.domain.repository import CommentFieldtype
from commentfield.domain.service import CommentField
from commentfield.domain.value import CommentId, CommentStatus, PageId


def make_comment(
    parent_id: int = 0,
    text: str = "A comment",
    cite: str = "Ryan",
    status: CommentStatus = CommentStatus.APPROVED,
    **kwargs,
) -> Comment:
    """Build an unsaved comment for seeding a store."""
    return Comment(
        parent_id=CommentId(parent_id),
        text=text,
        cite=cite,
        status=status,
        **kwargs,
    )


def make_page(page_id: int = 1, field_names: tuple[str, ...] = ("comments",)) -> Page:
    """Build a page carrying the given fields."""
    return Page(id=PageId(page_id), name=f"page-{page_id}", field_names=frozenset(field_names))


def make_field(
    fieldtype: CommentFieldtype, depth: int = 2, report=None, **settings
) -> CommentField:
    """Build a comments field with the given max depth on top of a store."""
    return CommentField(
        settings=CommentFieldSettings(depth=depth, **settings),
        fieldtype=fieldtype,
        report=report,
    )
