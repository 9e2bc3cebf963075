"""Entity: Book."""

from typing import Any

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from bookshelf.app.entities.core._base import Entity


class Book(Entity):
    """Book entity representing a catalog record.

    Books are immutable once created. Serialized field names are camelCase
    (``publicationYear``, ``createdAt``) to match the public JSON contract.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    isbn: str = Field(description="ISBN, unique across the catalog")
    publication_year: int = Field(description="Year of publication")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.isbn == other.isbn
            and self.publication_year == other.publication_year
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.author,
            self.isbn,
            self.publication_year,
        ))
