"""Persistence infrastructure providers."""

from dishka import Scope, provide

from commentfield.domain.repository import CommentFieldtype, PageRepository
from commentfield.persistence.repository import (
    InMemoryCommentFieldtype,
    InMemoryPageRepository,
)
from commentfield.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    One store per application: comments and pages live as long as the
    process does.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_comment_fieldtype(self) -> CommentFieldtype:
        """Provide the comments fieldtype."""
        return InMemoryCommentFieldtype()

    @provide(scope=Scope.APP)
    def get_page_repository(self) -> PageRepository:
        """Provide Page repository."""
        return InMemoryPageRepository()
