"""Account registration, login and profile management endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, status

from bookshelf.app.api.http.deps import get_account_service
from bookshelf.app.core.models.account import (
    LoginRequest,
    LoginResult,
    RegisterRequest,
    UpdateAccountRequest,
)
from bookshelf.app.core.services import AccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> dict[str, Any]:
    """Create a new account."""
    user = service.register(payload)
    return {"msg": "Account created successfully", "user": user.model_dump()}


@router.post("/login", response_model=LoginResult)
def login(
    payload: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> LoginResult:
    """Exchange email and password for a session token."""
    return service.authenticate(payload)


@router.get("")
def list_accounts(
    service: AccountService = Depends(get_account_service),
) -> list[dict[str, Any]]:
    """List every account without credentials."""
    return [account.model_dump(mode="json") for account in service.list_accounts()]


@router.put("/{account_id}")
def update_account(
    account_id: str,
    payload: UpdateAccountRequest,
    service: AccountService = Depends(get_account_service),
) -> dict[str, Any]:
    user = service.update_account(account_id, payload)
    return {"msg": "Profile updated successfully", "user": user.model_dump()}


@router.delete("/{account_id}")
def delete_account(
    account_id: str,
    service: AccountService = Depends(get_account_service),
) -> dict[str, str]:
    service.delete_account(account_id)
    return {"msg": "Account deleted successfully"}
