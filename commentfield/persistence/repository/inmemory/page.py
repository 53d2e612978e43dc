"""In-memory page repository."""

from typing import Optional

from commentfield.domain.model.page import Page
from commentfield.domain.repository.page import PageRepository
from commentfield.domain.value import PageId


class InMemoryPageRepository(PageRepository):
    """In-memory implementation of PageRepository."""

    def __init__(self) -> None:
        self._pages: dict[PageId, Page] = {}

    def find_by_id(self, page_id: PageId) -> Optional[Page]:
        """Find a page by ID."""
        return self._pages.get(page_id)

    def save(self, page: Page) -> Page:
        """Save or replace a page."""
        self._pages[page.id] = page
        return page
