"""Domain errors raised by services and mapped to HTTP responses in app.main."""

from fastapi import status


class AppError(Exception):
    """Base class for errors that carry a client-facing message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(AppError):
    """Malformed or missing input. Nothing was written."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Uniqueness violation or a delete blocked by references."""

    status_code = status.HTTP_409_CONFLICT
