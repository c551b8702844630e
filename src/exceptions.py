"""Application exceptions.

Services raise these; ``src.api.exception_handlers`` turns each one into an
HTTP response with a ``{"error": message}`` body. The ``status_code`` class
attribute is the only HTTP knowledge the hierarchy carries.
"""


class AppError(Exception):
    """Base class for all errors the API reports to clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Request input is missing or malformed."""

    status_code = 400


class ConflictError(AppError):
    """The resource already exists (e.g. duplicate email)."""

    status_code = 400


class NotFoundError(AppError):
    """The requested record does not exist."""

    status_code = 404


class InternalError(AppError):
    """Store or other server-side failure."""

    status_code = 500


class AuthError(AppError):
    """Authentication failed."""

    status_code = 401


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password. Both share one message."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class MissingTokenError(AuthError):
    """No bearer token was presented."""

    def __init__(self, message: str = "Token required"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """A bearer token was presented but could not be accepted."""

    status_code = 403

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class MalformedTokenError(InvalidTokenError):
    """The token is not a decodable JWT or lacks a usable subject."""


class InvalidSignatureError(InvalidTokenError):
    """The token signature does not match the server secret."""


class ExpiredTokenError(InvalidTokenError):
    """The token is past its expiry timestamp."""
