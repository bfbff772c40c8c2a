"""
Core module providing foundational components for the client.

Includes credential types, exceptions, the response envelope and logging.
"""

from .types import ClientId, ClientSecret, ApiToken
from .exceptions import (
    EversendError,
    ApiTokenMissingError,
    UnauthorizedError,
    RequestError,
    OperationError,
    NotFoundError,
)
from .models import EversendModel
from .response import ApiResponseBody, classify_response

__all__ = [
    'ClientId',
    'ClientSecret',
    'ApiToken',
    'EversendError',
    'ApiTokenMissingError',
    'UnauthorizedError',
    'RequestError',
    'OperationError',
    'NotFoundError',
    'EversendModel',
    'ApiResponseBody',
    'classify_response',
]
