"""
Response envelope and response handling.

Every Eversend answer is wrapped as {"code": ..., "data": ..., "success": ...}.
This module classifies raw httpx responses into the error taxonomy and
decodes envelopes into typed models.
"""

from typing import Generic, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import RequestError, UnauthorizedError
from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')
M = TypeVar('M', bound=BaseModel)


class ApiResponseBody(BaseModel, Generic[T]):
    """Generic {code, data, success} envelope. Only data is load-bearing."""

    model_config = ConfigDict(extra='ignore')

    code: Optional[int] = None
    data: Optional[T] = None
    success: Optional[bool] = None


def handle_unauthorized_error(response: httpx.Response) -> httpx.Response:
    """Raise UnauthorizedError for a 401, otherwise pass the response through."""
    if response.status_code == httpx.codes.UNAUTHORIZED:
        logger.warning(f"Unauthorized: {response.request.method} {response.request.url.path}")
        raise UnauthorizedError()
    return response


def handle_generic_error(response: httpx.Response) -> httpx.Response:
    """Raise RequestError for any non-2xx status."""
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning(
            f"Request failed with status {response.status_code}: "
            f"{response.request.method} {response.request.url.path}"
        )
        raise RequestError(
            f"Request failed with status: {response.status_code}",
            status_code=response.status_code,
            original_error=e,
        ) from e
    return response


def classify_response(response: httpx.Response) -> httpx.Response:
    """Handle an unauthorized or generic error, in that order."""
    return handle_generic_error(handle_unauthorized_error(response))


def parse_model(response: httpx.Response, model: Type[M]) -> M:
    """
    Decode a response body into a pydantic model.

    Args:
        response: Classified httpx response
        model: Model type to validate the JSON body against

    Returns:
        Validated model instance

    Raises:
        RequestError: If the body is not valid JSON or does not match the model
    """
    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise RequestError(
            f"Could not decode response body: {e.error_count()} validation error(s)",
            status_code=response.status_code,
            original_error=e,
        ) from e


def parse_envelope(response: httpx.Response, data_type) -> ApiResponseBody:
    """Decode a response body into ApiResponseBody[data_type]."""
    return parse_model(response, ApiResponseBody[data_type])


def require_data(envelope: ApiResponseBody, operation: str):
    """Return envelope.data, raising RequestError when the API sent none."""
    if envelope.data is None:
        raise RequestError(f"{operation}: response envelope carried no data")
    return envelope.data
