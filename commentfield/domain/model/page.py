"""Page entity."""

from pydantic import Field

from commentfield.domain.model.common import DomainModel
from commentfield.domain.value import PageId


class Page(DomainModel):
    """A page that can host comments.

    Only the parts the comments field needs are modelled: the page id and
    the names of the fields its template carries.
    """

    id: PageId
    name: str = ""
    field_names: frozenset[str] = Field(default_factory=frozenset)

    def has_field(self, field_name: str) -> bool:
        """Return True if the page's template carries the named field."""
        return field_name in self.field_names

    def __str__(self) -> str:
        return str(self.id)
