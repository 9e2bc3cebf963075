"""Account domain entity."""

from typing import Any

from pydantic import Field

from bookshelf.app.entities.core._base import Entity


class Account(Entity):
    """Account entity representing a registered user identity.

    The password is only ever held as a bcrypt hash, and the hash is excluded
    from every serialization of the entity.
    """

    name: str = Field(description="Display name")
    email: str = Field(description="Unique email address used to log in")
    password_hash: str = Field(
        exclude=True, repr=False, description="bcrypt hash of the password"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare accounts by business attributes, ignoring timestamps."""
        if not isinstance(other, Account):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.email == other.email
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.email,
        ))
