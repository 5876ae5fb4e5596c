from fastapi import status


class FinloanError(Exception):
    """Base class for errors that map directly onto an HTTP error response."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(FinloanError):
    """Malformed request payload. Carries the first violated constraint."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidInput(FinloanError):
    """Required fields of a computed route are missing or unusable."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(FinloanError):
    status_code = status.HTTP_404_NOT_FOUND


class PersistenceError(FinloanError):
    """The document store rejected a read or write."""

    status_code = status.HTTP_400_BAD_REQUEST
