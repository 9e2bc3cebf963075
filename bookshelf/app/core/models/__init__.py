"""Request and response models for the account and catalog operations."""

from .account import (
    AccountSummary,
    LoginRequest,
    LoginResult,
    RegisterRequest,
    UpdateAccountRequest,
)
from .book import AddBookRequest
from .token import SessionTokenClaims

__all__ = [
    "AccountSummary",
    "AddBookRequest",
    "LoginRequest",
    "LoginResult",
    "RegisterRequest",
    "SessionTokenClaims",
    "UpdateAccountRequest",
]
