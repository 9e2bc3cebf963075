"""Account database table model."""

from sqlmodel import Field

from bookshelf.app.entities.core._base import EntityTable


class AccountTable(EntityTable, table=True):
    """Database persistence model for accounts.

    The unique index on ``email`` is the store-side guarantee behind the
    repository's existence checks.
    """

    __tablename__ = "accounts"

    name: str
    email: str = Field(unique=True, index=True)
    password_hash: str
