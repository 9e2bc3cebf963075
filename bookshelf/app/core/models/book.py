"""Book request models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AddBookRequest(BaseModel):
    """Payload for adding a book; accepts ``publicationYear`` or ``publication_year``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    author: str | None = None
    isbn: str | None = None
    publication_year: int | None = Field(default=None, description="Year of publication")
