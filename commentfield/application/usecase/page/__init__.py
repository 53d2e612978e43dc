"""Page use cases."""

from .save_page import GetPageUseCase, PageResponse, SavePageRequest, SavePageUseCase

__all__ = [
    "GetPageUseCase",
    "PageResponse",
    "SavePageRequest",
    "SavePageUseCase",
]
