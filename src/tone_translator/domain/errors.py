"""Domain errors surfaced to API callers."""

from http import HTTPStatus


class TranslatorError(Exception):
    """Base error carrying a machine-readable code."""

    code = "INTERNAL_ERROR"
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthorizedError(TranslatorError):
    """Raised when no authenticated caller is present."""

    code = "UNAUTHORIZED"
    status_code = HTTPStatus.UNAUTHORIZED

    def __init__(
        self, message: str = "You must be signed in to perform this action."
    ) -> None:
        super().__init__(message)


class NotFoundError(TranslatorError):
    """Raised when an entity is missing or not owned by the caller."""

    code = "NOT_FOUND"
    status_code = HTTPStatus.NOT_FOUND


class ValidationError(TranslatorError):
    """Raised for malformed input or empty updates."""

    code = "VALIDATION_ERROR"
    status_code = HTTPStatus.BAD_REQUEST
