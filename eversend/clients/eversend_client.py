"""
Eversend API Client Module

Holds credentials, the base URL and one shared httpx.AsyncClient, and sends
every request issued by the resource groups.
"""

from typing import Any, Dict, Optional, Union

import httpx

from ..config.settings import Settings, get_settings
from ..core.exceptions import ApiTokenMissingError, RequestError
from ..core.logging_config import get_logger
from ..core.response import classify_response
from ..core.types import ApiToken, ClientId, ClientSecret
from ..resources import (
    Accounts,
    Auth,
    Beneficiaries,
    Collections,
    Crypto,
    Exchange,
    Payouts,
    Transactions,
    Wallets,
)

logger = get_logger(__name__)


def _as(kind, value):
    """Wrap a plain string into a credential type; pass instances through."""
    if value is None or isinstance(value, kind):
        return value
    return kind(value)


class Eversend:
    """
    Client for the Eversend API.

    Configuration is fixed once built, so a single instance can serve any
    number of concurrent operations.

    Example:
        async with Eversend.builder('client-id', 'client-secret') \\
                .set_api_token(token).build() as eversend:
            wallets = await eversend.wallets().get_wallets()
    """

    def __init__(
        self,
        client_id: Union[ClientId, str],
        client_secret: Union[ClientSecret, str],
        api_token: Union[ApiToken, str, None] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client. Prefer Eversend.builder() in application code.

        Args:
            client_id: Client ID from the business dashboard
            client_secret: Client secret from the business dashboard
            api_token: Bearer token from Auth.generate_api_token, if already known
            base_url: API root (default: Settings.base_url)
            http_client: Shared httpx.AsyncClient (default: a new one)
        """
        self._client_id = _as(ClientId, client_id)
        self._client_secret = _as(ClientSecret, client_secret)
        self._api_token = _as(ApiToken, api_token)
        self._base_url = base_url if base_url is not None else get_settings().base_url
        self._http = http_client if http_client is not None else httpx.AsyncClient()

    @classmethod
    def builder(
        cls,
        client_id: Union[ClientId, str],
        client_secret: Union[ClientSecret, str],
    ) -> 'EversendBuilder':
        """Start a configuration with the default base URL."""
        return EversendBuilder(client_id, client_secret)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> 'Eversend':
        """
        Build a client from environment settings.

        Raises:
            ValueError: If EVERSEND_CLIENT_ID or EVERSEND_CLIENT_SECRET is missing
        """
        settings = settings or get_settings()
        if not settings.validate():
            raise ValueError(
                "Missing Eversend API credentials. Please set EVERSEND_CLIENT_ID "
                "and EVERSEND_CLIENT_SECRET in your .env file."
            )

        builder = cls.builder(settings.client_id, settings.client_secret)
        builder.set_base_url(settings.base_url)
        if settings.api_token:
            builder.set_api_token(settings.api_token)
        return builder.build()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def client_id(self) -> ClientId:
        return self._client_id

    @property
    def client_secret(self) -> ClientSecret:
        return self._client_secret

    def api_token(self) -> ApiToken:
        """
        Return the configured bearer token.

        Raises:
            ApiTokenMissingError: If no token was set
        """
        if self._api_token is None:
            raise ApiTokenMissingError()
        return self._api_token

    def with_api_token(self, api_token: Union[ApiToken, str]) -> 'Eversend':
        """Return a client sharing this one's transport, with the token set."""
        return Eversend(
            client_id=self._client_id,
            client_secret=self._client_secret,
            api_token=api_token,
            base_url=self._base_url,
            http_client=self._http,
        )

    async def send(
        self,
        method: str,
        path: str,
        json: Any = None,
        authenticated: bool = True,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send one request and classify the answer.

        Args:
            method: HTTP method
            path: Path below the base URL, starting with '/'
            json: JSON-serializable body, or None for no body
            authenticated: Attach the bearer token (resolved before any I/O)
            headers: Extra headers

        Returns:
            A 2xx httpx.Response

        Raises:
            ApiTokenMissingError: authenticated is set and no token is configured
            UnauthorizedError: The API answered 401
            RequestError: Transport failure or any other non-2xx status
        """
        request_headers = dict(headers or {})
        if authenticated:
            request_headers['Authorization'] = f"Bearer {self.api_token()}"

        url = f"{self._base_url}{path}"
        logger.debug(f"Sending {method} {path}")

        try:
            response = await self._http.request(method, url, json=json, headers=request_headers)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise RequestError(f"{method} {path} failed: {e}", original_error=e) from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return classify_response(response)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> 'Eversend':
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def auth(self) -> Auth:
        return Auth(self)

    def accounts(self) -> Accounts:
        return Accounts(self)

    def wallets(self) -> Wallets:
        return Wallets(self)

    def beneficiaries(self) -> Beneficiaries:
        return Beneficiaries(self)

    def collections(self) -> Collections:
        return Collections(self)

    def crypto(self) -> Crypto:
        return Crypto(self)

    def exchange(self) -> Exchange:
        return Exchange(self)

    def payouts(self) -> Payouts:
        return Payouts(self)

    def transactions(self) -> Transactions:
        return Transactions(self)


class EversendBuilder:
    """
    Builder for an Eversend client.

    Setters only record values and return the builder for chaining.
    """

    def __init__(self, client_id: Union[ClientId, str], client_secret: Union[ClientSecret, str]):
        self._client_id = _as(ClientId, client_id)
        self._client_secret = _as(ClientSecret, client_secret)
        self._api_token: Optional[ApiToken] = None
        self._base_url = get_settings().base_url
        self._transport: Optional[httpx.AsyncBaseTransport] = None

    def set_base_url(self, base_url: str) -> 'EversendBuilder':
        self._base_url = base_url
        return self

    def set_client_id(self, client_id: Union[ClientId, str]) -> 'EversendBuilder':
        self._client_id = _as(ClientId, client_id)
        return self

    def set_client_secret(self, client_secret: Union[ClientSecret, str]) -> 'EversendBuilder':
        self._client_secret = _as(ClientSecret, client_secret)
        return self

    def set_api_token(self, api_token: Union[ApiToken, str]) -> 'EversendBuilder':
        self._api_token = _as(ApiToken, api_token)
        return self

    def set_transport(self, transport: httpx.AsyncBaseTransport) -> 'EversendBuilder':
        """Use a custom httpx transport, e.g. httpx.MockTransport in tests."""
        self._transport = transport
        return self

    def build(self) -> Eversend:
        """Create the HTTP client and return the configured Eversend client."""
        http_client = httpx.AsyncClient(transport=self._transport)
        return Eversend(
            client_id=self._client_id,
            client_secret=self._client_secret,
            api_token=self._api_token,
            base_url=self._base_url,
            http_client=http_client,
        )
