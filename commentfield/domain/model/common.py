"""Base model for comment and page entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are immutable; stores replace them with ``model_copy`` on change.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Collections hold other domain models
    )
