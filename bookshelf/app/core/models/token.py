"""Session token claim model."""

from pydantic import BaseModel, Field


class SessionTokenClaims(BaseModel):
    """Structured representation of a verified session token."""

    raw_token: str = Field(default="", description="Original JWT token")
    issuer: str = Field(description="Issuer")
    account_id: str = Field(description="Subject (account ID)")
    issued_at: int = Field(description="Issued at")
    expires_at: int = Field(description="Expiration time")
    jti: str | None = Field(default=None, description="JWT ID (unique token identifier)")
