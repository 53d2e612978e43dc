"""Domain layer DI providers."""

from dishka import Scope, provide

from commentfield.config import CommentFieldSettings
from commentfield.domain.repository import CommentFieldtype
from commentfield.domain.service import CommentField
from commentfield.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the store lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_field(
        self, settings: CommentFieldSettings, fieldtype: CommentFieldtype
    ) -> CommentField:
        """Provide the comments field service."""
        return CommentField(settings=settings, fieldtype=fieldtype)
