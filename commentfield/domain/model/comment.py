"""Comment entity.

Comments live on a page, inside a named comments field. Replies point at
their parent through ``parent_id``; depth and children are derived from the
page's comment collection (see ``CommentArray``).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentfield.domain.model.common import DomainModel
from commentfield.domain.value import CommentId, CommentStatus, PageId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (0 for top-level)
    - page_id / field_name: Where the comment lives (None until attached)

    An ``id`` of 0 or below means the comment has not been saved yet.
    """

    id: CommentId = CommentId(0)
    parent_id: CommentId = CommentId(0)
    page_id: Optional[PageId] = None
    field_name: Optional[str] = None
    status: CommentStatus = CommentStatus.PENDING
    text: str = Field(default="", max_length=10000)
    cite: str = ""  # Author display name
    email: str = ""
    website: str = ""
    ip: str = ""
    user_agent: str = ""
    code: str = ""  # Secret token for moderation links
    subcode: str = ""  # Secret token for notification links
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    stars: int = Field(default=0, ge=0, le=5)
    created: datetime = Field(default_factory=datetime.now)

    @property
    def is_saved(self) -> bool:
        """Whether the comment has been persisted by the store."""
        return self.id > 0

    @property
    def is_deleted(self) -> bool:
        return self.status >= CommentStatus.DELETE

    def __str__(self) -> str:
        return str(self.id)
