"""Mock persistence providers for testing."""

from dishka import Scope, provide

from commentfield.domain.repository import CommentFieldtype, PageRepository
from commentfield.persistence.repository.inmemory import (
    InMemoryCommentFieldtype,
    InMemoryPageRepository,
)
from commentfield.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider.

    Uses REQUEST scope to ensure test isolation - each test gets fresh stores.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_comment_fieldtype(self) -> CommentFieldtype:
        """Provide a fresh in-memory comments fieldtype."""
        return InMemoryCommentFieldtype()

    @provide(scope=Scope.REQUEST)
    def get_page_repository(self) -> PageRepository:
        """Provide a fresh in-memory page repository."""
        return InMemoryPageRepository()
