"""Comment store interface.

The comments fieldtype owns storage, querying and voting for every comments
field. The field object only adds threading rules on top of it and passes its
own configuration along with each call.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from commentfield.config import CommentFieldSettings
from commentfield.domain.model.comment import Comment
from commentfield.domain.model.comment_array import CommentArray
from commentfield.domain.value import CommentId, PageId


class CommentFieldtype(ABC):
    """Storage and query contract for comments fields.

    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    def find(
        self,
        selector: str,
        field: CommentFieldSettings,
        options: Optional[Mapping[str, Any]] = None,
    ) -> list[Comment]:
        """Find comments matching a selector string.

        Args:
            selector: Selector such as ``"page=1, status>=1, sort=-created"``
            field: Field whose comments are searched
            options: Store-specific find options

        Returns:
            Matching comments
        """
        pass

    @abstractmethod
    def count(self, selector: str, field: CommentFieldSettings) -> int:
        """Return the number of comments matching a selector string."""
        pass

    @abstractmethod
    def get_comment_by_code(
        self, page_id: PageId, field: CommentFieldSettings, code: str
    ) -> Optional[Comment]:
        """Find a comment by its code or subcode.

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    def get_comment_by_id(
        self, page_id: PageId, field: CommentFieldSettings, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment on a page by ID.

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    def page_comments(
        self, page_id: PageId, field: CommentFieldSettings
    ) -> Optional[CommentArray]:
        """Return all comments of a field on a page, in display order.

        Returns:
            The page's collection, or None if the page holds none for this field
        """
        pass

    @abstractmethod
    def add_comment(
        self, page_id: PageId, field: CommentFieldSettings, comment: Comment
    ) -> Comment:
        """Store a new comment on a page.

        Returns:
            The saved comment, with id, codes and initial status assigned
        """
        pass

    @abstractmethod
    def update_comment(
        self,
        page_id: PageId,
        field: CommentFieldSettings,
        comment: Comment,
        properties: Mapping[str, Any],
    ) -> bool:
        """Update specific properties of a stored comment.

        Returns:
            True if the comment was updated, False if it does not exist
        """
        pass

    @abstractmethod
    def delete_comment(
        self,
        page_id: PageId,
        field: CommentFieldSettings,
        comment: Comment,
        notes: str = "",
    ) -> bool:
        """Delete a comment.

        Args:
            notes: Free-form reason, kept in the store's log

        Returns:
            True if the comment was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    def vote_comment(
        self,
        page_id: PageId,
        field: CommentFieldSettings,
        comment: Comment,
        up: bool = True,
        voter: str = "",
    ) -> bool:
        """Record a vote for a comment.

        Args:
            up: True for an upvote, False for a downvote
            voter: Identity of the voter (user name or IP address)

        Returns:
            True if the vote counted, False if voting is disabled or duplicate
        """
        pass
