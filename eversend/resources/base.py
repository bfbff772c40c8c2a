"""
Base resource group.

A resource group is a stateless view over an Eversend client exposing the
operations of one REST sub-path.
"""

from typing import TYPE_CHECKING, Any, Optional

from ..core.logging_config import get_logger
from ..core.models import EversendModel
from ..core.response import parse_envelope, require_data

if TYPE_CHECKING:
    from ..clients.eversend_client import Eversend


class BaseResource:
    """Common request helpers for resource groups."""

    def __init__(self, eversend: 'Eversend'):
        self.eversend = eversend
        self.logger = get_logger(self.__class__.__module__)

    @staticmethod
    def _body(params: Any) -> Any:
        if params is None:
            return None
        if isinstance(params, EversendModel):
            return params.to_wire()
        if isinstance(params, (list, tuple)):
            return [BaseResource._body(item) for item in params]
        return params

    async def _fetch(self, operation: str, method: str, path: str, data_type, params: Optional[Any] = None):
        """
        Send a request and return the envelope's data decoded as data_type.

        Raises:
            RequestError: If data is missing or does not match data_type
        """
        response = await self.eversend.send(method, path, json=self._body(params))
        envelope = parse_envelope(response, data_type)
        return require_data(envelope, operation)

    async def _execute(self, operation: str, method: str, path: str, params: Optional[Any] = None) -> None:
        """Send a request whose envelope carries no data worth returning."""
        response = await self.eversend.send(method, path, json=self._body(params))
        envelope = parse_envelope(response, Any)
        self.logger.debug(f"{operation} completed (code={envelope.code}, success={envelope.success})")
