"""Page use cases."""

from pydantic import BaseModel

from commentfield.domain.error import NotFoundError
from commentfield.domain.model.page import Page
from commentfield.domain.repository import PageRepository
from commentfield.domain.value import PageId


class PageResponse(BaseModel):
    """Page response."""

    page_id: int
    name: str
    field_names: list[str]

    @classmethod
    def from_page(cls, page: Page) -> "PageResponse":
        return cls(page_id=page.id, name=page.name, field_names=sorted(page.field_names))


class SavePageRequest(BaseModel):
    """Register or replace a page."""

    page_id: int
    name: str = ""
    field_names: list[str] = []


class SavePageUseCase:
    """Use case for registering the pages comments may be posted on."""

    def __init__(self, page_repository: PageRepository) -> None:
        self.page_repository = page_repository

    def execute(self, request: SavePageRequest) -> PageResponse:
        page = Page(
            id=PageId(request.page_id),
            name=request.name,
            field_names=frozenset(request.field_names),
        )
        return PageResponse.from_page(self.page_repository.save(page))


class GetPageUseCase:
    """Use case for reading a registered page."""

    def __init__(self, page_repository: PageRepository) -> None:
        self.page_repository = page_repository

    def execute(self, page_id: int) -> PageResponse:
        """Execute get page flow.

        Raises:
            NotFoundError: If the page is not registered
        """
        page = self.page_repository.find_by_id(PageId(page_id))
        if page is None:
            raise NotFoundError("Page", str(page_id))
        return PageResponse.from_page(page)
