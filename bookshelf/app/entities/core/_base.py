"""Shared identity and timestamp fields for entities and their tables."""

import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def new_id() -> str:
    """Generate a random UUID4 identifier in canonical string form."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Domain object with an id and write timestamps."""

    id: str = PydanticField(default_factory=new_id, description="UUID identifier")
    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)


class EntityTable(SQLModel, table=False):
    """Persistence counterpart of ``Entity``.

    ``created_at`` is indexed because listings are ordered by it.
    """

    id: str = Field(primary_key=True, default_factory=new_id)
    created_at: datetime = Field(default_factory=utc_now, nullable=False, index=True)
    updated_at: datetime = Field(
        default_factory=utc_now,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
