"""Ordered comment collection for one page and field."""

from collections.abc import Iterator

from commentfield.domain.model.comment import Comment
from commentfield.domain.model.common import DomainModel
from commentfield.domain.value import CommentId, PageId


class CommentArray(DomainModel):
    """The comments of a single field on a single page, in display order.

    All tree queries (depth, children, descendants) are answered from this
    collection alone, so they only ever see comments of the same page and
    field.
    """

    page_id: PageId
    field_name: str
    items: tuple[Comment, ...] = ()

    def __iter__(self) -> Iterator[Comment]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def get(self, comment_id: int) -> Comment | None:
        """Return the comment with the given id, or None."""
        for comment in self.items:
            if comment.id == comment_id:
                return comment
        return None

    def has_comment(self, comment_id: int) -> bool:
        return self.get(comment_id) is not None

    def children(self, comment_id: int) -> list[Comment]:
        """Direct replies to the given comment.

        Unsaved comments (id <= 0) never have children; otherwise every root
        comment would look like a child of a draft.
        """
        if comment_id <= 0:
            return []
        return [c for c in self.items if c.parent_id == comment_id]

    def depth(self, comment: Comment) -> int:
        """Distance from the root along parent links (root comments are 0).

        Parents missing from the collection end the walk. A corrupt parent
        chain that loops back on itself is cut at the first repeat.
        """
        depth = 0
        seen: set[CommentId] = {comment.id}
        parent_id = comment.parent_id
        while parent_id:
            parent = self.get(parent_id)
            if parent is None or parent.id in seen:
                break
            seen.add(parent.id)
            depth += 1
            parent_id = parent.parent_id
        return depth

    def has_child(
        self, comment_id: int, child_id: int, recursive: bool = True
    ) -> bool:
        """Return True if ``child_id`` is a reply to ``comment_id``.

        Args:
            comment_id: Ancestor candidate
            child_id: Descendant candidate
            recursive: Search all descendants rather than direct replies only
        """
        pending = self.children(comment_id)
        seen: set[CommentId] = set()
        while pending:
            child = pending.pop()
            if child.id == child_id:
                return True
            if not recursive or child.id in seen:
                continue
            seen.add(child.id)
            pending.extend(self.children(child.id))
        return False
