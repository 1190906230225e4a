"""
Error kinds raised by the storage and service layers.

Each error carries an English message and the HTTP status the API
layer answers with.  Handlers registered in ``main`` turn them into
``{"error": message}`` responses.
"""


class AttendanceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AttendanceError):
    """Raised when client input is missing or malformed."""

    status_code = 400


class NotFoundError(AttendanceError):
    """Raised when the record targeted by a request does not exist."""

    status_code = 404


class StorageError(AttendanceError):
    """Raised when the records file cannot be read or written."""

    status_code = 500
