"""Application layer DI providers."""

from dishka import Scope, provide

from commentfield.application.usecase.comment import (
    AddCommentUseCase,
    CountCommentsUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    MoveCommentUseCase,
    UpdateCommentUseCase,
    VoteCommentUseCase,
)
from commentfield.application.usecase.page import GetPageUseCase, SavePageUseCase
from commentfield.domain.repository import PageRepository
from commentfield.domain.service import CommentField
from commentfield.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self, comment_field: CommentField, page_repository: PageRepository
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_field=comment_field, page_repository=page_repository
        )

    @provide
    def get_comments_use_case(self, comment_field: CommentField) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_field=comment_field)

    @provide
    def get_comment_use_case(self, comment_field: CommentField) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_field=comment_field)

    @provide
    def get_count_comments_use_case(
        self, comment_field: CommentField
    ) -> CountCommentsUseCase:
        """Provide count comments use case."""
        return CountCommentsUseCase(comment_field=comment_field)

    @provide
    def get_update_comment_use_case(
        self, comment_field: CommentField
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_field=comment_field)

    @provide
    def get_move_comment_use_case(
        self, comment_field: CommentField, page_repository: PageRepository
    ) -> MoveCommentUseCase:
        """Provide move comment use case."""
        return MoveCommentUseCase(
            comment_field=comment_field, page_repository=page_repository
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_field: CommentField
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_field=comment_field)

    @provide
    def get_vote_comment_use_case(
        self, comment_field: CommentField
    ) -> VoteCommentUseCase:
        """Provide vote comment use case."""
        return VoteCommentUseCase(comment_field=comment_field)

    # Page use cases
    @provide
    def get_save_page_use_case(self, page_repository: PageRepository) -> SavePageUseCase:
        """Provide save page use case."""
        return SavePageUseCase(page_repository=page_repository)

    @provide
    def get_page_use_case(self, page_repository: PageRepository) -> GetPageUseCase:
        """Provide get page use case."""
        return GetPageUseCase(page_repository=page_repository)
