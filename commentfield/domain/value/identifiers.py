"""Strongly typed identifiers for comment field entities.

Comment and page identifiers are integers assigned by the store.
A comment id of 0 or below marks a comment that has not been saved yet.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
PageId = NewType("PageId", int)
