"""Page routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from commentfield.application.usecase.page import (
    GetPageUseCase,
    PageResponse,
    SavePageRequest,
    SavePageUseCase,
)

router = APIRouter(prefix="/pages", tags=["pages"], route_class=DishkaRoute)


class SavePageAPIRequest(BaseModel):
    """API request for registering a page."""

    name: str = ""
    field_names: list[str] = []


@router.put("/{page_id}", response_model=PageResponse)
async def save_page(
    page_id: int,
    request: SavePageAPIRequest,
    save_page_use_case: FromDishka[SavePageUseCase],
) -> PageResponse:
    """Register a page and the fields its template carries."""
    return save_page_use_case.execute(
        SavePageRequest(
            page_id=page_id, name=request.name, field_names=request.field_names
        )
    )


@router.get("/{page_id}", response_model=PageResponse)
async def get_page(
    page_id: int,
    get_page_use_case: FromDishka[GetPageUseCase],
) -> PageResponse:
    """Get a registered page."""
    return get_page_use_case.execute(page_id)
