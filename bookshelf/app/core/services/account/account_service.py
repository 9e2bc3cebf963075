"""Account registration, authentication and profile management."""

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from bookshelf.app.core.errors import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from bookshelf.app.core.models.account import (
    AccountSummary,
    LoginRequest,
    LoginResult,
    RegisterRequest,
    UpdateAccountRequest,
)
from bookshelf.app.core.security import (
    MAX_PASSWORD_BYTES,
    hash_password,
    is_valid_email,
    parse_entity_id,
    verify_password,
)
from bookshelf.app.core.services.jwt.jwt_gen import JwtGeneratorService
from bookshelf.app.entities.core.account import Account, AccountRepository
from bookshelf.app.runtime.context import get_config

DUPLICATE_EMAIL_MESSAGE = "An account with this email already exists"
EMAIL_IN_USE_MESSAGE = "This email is already in use by another account"
INVALID_EMAIL_MESSAGE = "Please provide a valid email address"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


def _has_text(value: str | None) -> bool:
    return bool(value and value.strip())


class AccountService:
    """Operations on user accounts.

    Each instance works against a single request-scoped session and commits
    its own writes.
    """

    def __init__(self, session: Session, jwt_generator: JwtGeneratorService):
        self._session = session
        self._repository = AccountRepository(session)
        self._jwt_generator = jwt_generator

    def register(self, request: RegisterRequest) -> AccountSummary:
        if not _has_text(request.name) or not request.email or not request.password:
            raise ValidationError("Please provide name, email, and password")
        if not is_valid_email(request.email):
            raise ValidationError(INVALID_EMAIL_MESSAGE)

        min_length = get_config().security.min_password_length
        if len(request.password) < min_length:
            raise ValidationError(
                f"Password must be at least {min_length} characters long"
            )
        if len(request.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
            )

        try:
            if self._repository.get_by_email(request.email) is not None:
                raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

            account = self._repository.create(
                Account(
                    name=request.name,
                    email=request.email,
                    password_hash=hash_password(request.password),
                )
            )
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            logger.info("Registration rejected by unique index for {}", request.email)
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE) from e
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Failed to register account: {}", e)
            raise InternalError("Failed to create account. Please try again later.") from e

        logger.info("account.registered", account_id=account.id)
        return AccountSummary.from_account(account)

    def authenticate(self, request: LoginRequest) -> LoginResult:
        """Verify credentials and issue a session token.

        Unknown emails and wrong passwords produce the same error so the
        response does not reveal which accounts exist.
        """
        if not request.email or not request.password:
            raise ValidationError("Please provide email and password")

        try:
            account = self._repository.get_by_email(request.email)
        except SQLAlchemyError as e:
            logger.error("Failed to look up account for login: {}", e)
            raise InternalError("Failed to log in. Please try again later.") from e

        if account is None or not verify_password(request.password, account.password_hash):
            logger.info("account.login_rejected")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        token = self._jwt_generator.generate_session_token(account.id)
        logger.info("account.logged_in", account_id=account.id)
        return LoginResult(token=token, user=AccountSummary.from_account(account))

    def list_accounts(self) -> list[Account]:
        try:
            return self._repository.list_all()
        except SQLAlchemyError as e:
            logger.error("Failed to list accounts: {}", e)
            raise InternalError("Failed to retrieve users. Please try again later.") from e

    def update_account(
        self, account_id: str, request: UpdateAccountRequest
    ) -> AccountSummary:
        """Apply the provided fields of ``request`` to an existing account.

        A field is provided when it is present, not null and not blank. Fields
        that are not provided stay unchanged; a provided email must be valid.
        """
        normalized_id = parse_entity_id(account_id)
        if normalized_id is None:
            raise NotFoundError("Invalid user ID provided")

        new_name = request.name if _has_text(request.name) else None
        new_email = request.email or None
        if new_email is not None and not is_valid_email(new_email):
            raise ValidationError(INVALID_EMAIL_MESSAGE)

        try:
            account = self._repository.get(normalized_id)
            if account is None:
                raise NotFoundError("User not found")

            if new_email is not None and new_email != account.email:
                if self._repository.email_taken_by_other(new_email, normalized_id):
                    raise ConflictError(EMAIL_IN_USE_MESSAGE)
                account.email = new_email
            if new_name is not None:
                account.name = new_name

            updated = self._repository.update(account)
            if updated is None:
                raise NotFoundError("User not found")
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            raise ConflictError(EMAIL_IN_USE_MESSAGE) from e
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Failed to update account {}: {}", normalized_id, e)
            raise InternalError("Failed to update profile. Please try again later.") from e

        logger.info("account.updated", account_id=normalized_id)
        return AccountSummary.from_account(updated)

    def delete_account(self, account_id: str) -> None:
        normalized_id = parse_entity_id(account_id)
        if normalized_id is None:
            raise NotFoundError("Invalid user ID provided")

        try:
            deleted = self._repository.delete(normalized_id)
            if not deleted:
                raise NotFoundError("User not found")
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Failed to delete account {}: {}", normalized_id, e)
            raise InternalError("Failed to delete account. Please try again later.") from e

        logger.info("account.deleted", account_id=normalized_id)
