"""
Exception hierarchy for the Eversend client.

Every failure surfaced by an operation is one of these types.
"""

from typing import Optional


class EversendError(Exception):
    """Base exception for all Eversend client errors."""
    pass


class ApiTokenMissingError(EversendError):
    """Raised before any request when bearer auth is needed but no token is set."""

    def __init__(self, message: str = "API token was not found on the Eversend client"):
        super().__init__(message)


class UnauthorizedError(EversendError):
    """Raised when the API answers with HTTP 401."""

    def __init__(self, message: str = "Unauthorized", status_code: int = 401):
        super().__init__(message)
        self.status_code = status_code


class RequestError(EversendError):
    """Raised for transport failures, non-2xx answers and malformed bodies."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.original_error = original_error


class OperationError(EversendError):
    """
    Operation specific failure.

    Attributes:
        operation: Name of the operation that failed (e.g. 'get_transaction')
    """

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation


class NotFoundError(OperationError):
    """Raised when a lookup returned an empty collection."""

    def __init__(self, operation: str, message: Optional[str] = None):
        super().__init__(operation, message or f"{operation}: could not find the entity in the response")
