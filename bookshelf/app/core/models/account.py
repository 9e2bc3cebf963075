"""Account request and response models."""

from pydantic import BaseModel, Field

from bookshelf.app.entities.core.account import Account


class RegisterRequest(BaseModel):
    """Registration payload.

    Fields are optional at the schema level so that missing values are
    reported by the account service as a 400 rather than a schema error.
    """

    name: str | None = Field(default=None, description="Display name")
    email: str | None = Field(default=None, description="Email address")
    password: str | None = Field(default=None, description="Plaintext password")


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class UpdateAccountRequest(BaseModel):
    """Profile update payload.

    A field counts as provided when it is present and not null. Provided
    values are validated; they are never silently ignored.
    """

    name: str | None = None
    email: str | None = None


class AccountSummary(BaseModel):
    """Public view of an account: never carries the password or its hash."""

    id: str
    name: str
    email: str

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(id=account.id, name=account.name, email=account.email)


class LoginResult(BaseModel):
    token: str = Field(description="Signed session token")
    user: AccountSummary
