"""Error taxonomy shared by the services and the HTTP boundary.

Services raise these; ``repairshop.api.errors`` turns them into
``{"error": message}`` responses with the matching status code.
"""


class AuthServiceError(Exception):
    """Base class for expected, client-visible failures."""

    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthServiceError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid request"


class ConflictError(AuthServiceError):
    """A unique value (e.g. username) is already taken."""

    status_code = 400
    default_message = "Username already exists"


class InvalidCredentials(AuthServiceError):
    status_code = 401
    default_message = "Invalid credentials"


class AuthenticationRequired(AuthServiceError):
    """No valid bearer token on a protected request."""

    status_code = 401
    default_message = "Authentication required"


class AuthorizationDenied(AuthServiceError):
    status_code = 403
    default_message = "Admin access required"


class NotFoundError(AuthServiceError):
    status_code = 404
    default_message = "Not found"


class InternalError(AuthServiceError):
    """Unexpected persistence or signing failure. The message stays opaque."""

    status_code = 500
    default_message = "Internal server error"
