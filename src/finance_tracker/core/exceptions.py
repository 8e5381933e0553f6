"""Domain exceptions. Each carries the HTTP status it renders as."""


class FinanceTrackerError(Exception):
    """Base class for errors that map onto an API response."""

    status_code: int = 500
    default_message: str = "Something went wrong"

    def __init__(self, message: str | None = None, errors: list[str] | None = None) -> None:
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class ConfigurationError(FinanceTrackerError):
    """Required configuration is missing. Raised at startup, never per request."""

    default_message = "Server is misconfigured"


class ValidationError(FinanceTrackerError):
    """Missing or malformed input; `errors` holds field-level messages."""

    status_code = 400
    default_message = "Validation error"


class IncompleteProfile(ValidationError):
    """Login payload lacks the user's email or name."""

    default_message = "User information is incomplete"


class DuplicateKeyError(FinanceTrackerError):
    """A unique constraint would be violated."""

    status_code = 400
    default_message = "Record already exists"


class DuplicateEmail(DuplicateKeyError):
    """Another account already owns this email."""

    default_message = "Email already exists with a different account"


class NotFoundError(FinanceTrackerError):
    """Entity is absent or owned by someone else; the two are not distinguished."""

    status_code = 404
    default_message = "Not found or you do not have permission to access it"


class AuthError(FinanceTrackerError):
    """Credential could not be turned into an authenticated user."""

    status_code = 401
    default_message = "Authentication failed"


class MissingCredential(AuthError):
    default_message = "Access denied. No token provided."


class TokenExpired(AuthError):
    default_message = "Token has expired. Please login again."


class TokenInvalid(AuthError):
    default_message = "Invalid token. Please login again."


class TokenRevoked(AuthError):
    default_message = "Token has been revoked. Please login again."


class MalformedCredential(AuthError):
    """External token is not even shaped like a token."""

    status_code = 400
    default_message = "Invalid token format"


class UnknownCredentialFailure(AuthError):
    default_message = "External authentication failed"


class UserNotFound(AuthError):
    default_message = "User not found. Invalid token."
