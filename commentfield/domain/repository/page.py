"""Page repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from commentfield.domain.model.page import Page
from commentfield.domain.value import PageId


class PageRepository(ABC):
    """Repository for Page entity.

    Pages belong to the host site; comments only need to look them up.
    """

    @abstractmethod
    def find_by_id(self, page_id: PageId) -> Optional[Page]:
        """Find a page by ID.

        Args:
            page_id: The page's unique identifier

        Returns:
            The page if found, None otherwise
        """
        pass

    @abstractmethod
    def save(self, page: Page) -> Page:
        """Save a page (create or update)."""
        pass
