"""Account repository for data access operations."""

from datetime import UTC, datetime

from sqlmodel import Session, col, select

from .entity import Account
from .table import AccountTable


class AccountRepository:
    """Data-access layer for accounts."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, account_id: str) -> Account | None:
        row = self._session.get(AccountTable, account_id)
        if row is None:
            return None
        return Account.model_validate(row, from_attributes=True)

    def get_by_email(self, email: str) -> Account | None:
        statement = select(AccountTable).where(AccountTable.email == email)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Account.model_validate(row, from_attributes=True)

    def email_taken_by_other(self, email: str, account_id: str) -> bool:
        """Return True if ``email`` belongs to an account other than ``account_id``."""
        statement = select(AccountTable.id).where(
            (AccountTable.email == email) & (AccountTable.id != account_id)
        )
        return self._session.exec(statement).first() is not None

    def list_all(self) -> list[Account]:
        statement = select(AccountTable).order_by(
            col(AccountTable.created_at), col(AccountTable.id)
        )
        rows = self._session.exec(statement).all()
        return [Account.model_validate(row, from_attributes=True) for row in rows]

    def create(self, account: Account) -> Account:
        row = AccountTable(
            id=account.id,
            name=account.name,
            email=account.email,
            password_hash=account.password_hash,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Account.model_validate(row, from_attributes=True)

    def update(self, account: Account) -> Account | None:
        """Persist name and email changes; None if the row no longer exists."""
        row = self._session.get(AccountTable, account.id)
        if row is None:
            return None

        row.name = account.name
        row.email = account.email
        row.updated_at = datetime.now(UTC)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Account.model_validate(row, from_attributes=True)

    def delete(self, account_id: str) -> bool:
        row = self._session.get(AccountTable, account_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
