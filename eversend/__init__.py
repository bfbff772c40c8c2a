"""
Typed asynchronous client for the Eversend API.

    from eversend import Eversend

    eversend = Eversend.builder(client_id, client_secret).build()
    token = await eversend.auth().generate_api_token()
    eversend = eversend.with_api_token(token)
    wallets = await eversend.wallets().get_wallets()
"""

from .clients import Eversend, EversendBuilder
from .core import (
    ApiToken,
    ClientId,
    ClientSecret,
    EversendError,
    ApiTokenMissingError,
    UnauthorizedError,
    RequestError,
    OperationError,
    NotFoundError,
    ApiResponseBody,
)

__version__ = '0.1.0'

__all__ = [
    'Eversend',
    'EversendBuilder',
    'ApiToken',
    'ClientId',
    'ClientSecret',
    'EversendError',
    'ApiTokenMissingError',
    'UnauthorizedError',
    'RequestError',
    'OperationError',
    'NotFoundError',
    'ApiResponseBody',
]
