"""Domain error taxonomy shared by the account and catalog services.

Every error carries the HTTP status code it is rendered with and a stable,
human-readable message that is safe to return to clients.
"""


class ServiceError(Exception):
    """Base class for failures reported by a service operation."""

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid data provided"


class ConflictError(ServiceError):
    """A uniqueness constraint would be violated."""

    status_code = 400
    default_message = "Resource already exists"


class AuthenticationError(ServiceError):
    """Credentials could not be verified."""

    status_code = 400
    default_message = "Invalid email or password"


class NotFoundError(ServiceError):
    """The identifier does not resolve to a stored record."""

    status_code = 404
    default_message = "Resource not found"


class InternalError(ServiceError):
    """The store is unreachable or an unexpected fault occurred."""

    status_code = 500
    default_message = "Internal Server Error"
