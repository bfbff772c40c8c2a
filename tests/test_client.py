"""
Tests for the Eversend client and builder.

Tests configuration, token handling and the shared request dispatch.
"""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from eversend import (
    ApiToken,
    ApiTokenMissingError,
    ClientId,
    ClientSecret,
    Eversend,
    RequestError,
    UnauthorizedError,
)
from eversend.config.settings import DEFAULT_BASE_URL, Settings
from eversend.resources import Accounts, Wallets

from .conftest import BASE_URL, TEST_TOKEN

WALLET = {
    "currency": "UGX",
    "currencyType": "fiat",
    "amount": 1000,
    "enabled": True,
    "name": "Ug Wallet",
    "icon": "ug-flag",
    "amountInBaseCurrency": 1000,
    "isMain": True,
}


class TestBuilder:
    """Test EversendBuilder."""

    def test_default_base_url(self):
        """Test the builder starts from the configured default host."""
        with patch.dict("os.environ", {}, clear=True):
            with patch("eversend.clients.eversend_client.get_settings", return_value=Settings()):
                eversend = Eversend.builder("id", "secret").build()
        assert eversend.base_url == DEFAULT_BASE_URL

    def test_set_base_url(self):
        """Test setting the base URL through the builder."""
        eversend = (
            Eversend.builder(ClientId("sk_example_123456789"), ClientSecret("sk_example_123456781"))
            .set_base_url("https://auth.your-app.com")
            .build()
        )
        assert eversend.base_url == "https://auth.your-app.com"

    def test_set_client_secret(self):
        """Test replacing the client secret through the builder."""
        eversend = (
            Eversend.builder("sk_some_client_id", "sk_some_client_secret")
            .set_client_secret(ClientSecret("sk_another_client_secret"))
            .build()
        )
        assert eversend.client_secret == ClientSecret("sk_another_client_secret")

    def test_set_client_id(self):
        """Test replacing the client id through the builder."""
        eversend = (
            Eversend.builder("sk_some_client_id", "sk_some_client_secret")
            .set_client_id("sk_another_client_id")
            .build()
        )
        assert eversend.client_id == ClientId("sk_another_client_id")

    def test_plain_strings_are_wrapped(self):
        """Test credentials given as str become the typed wrappers."""
        eversend = Eversend.builder("id", "secret").set_api_token("tok").build()
        assert isinstance(eversend.client_id, ClientId)
        assert isinstance(eversend.client_secret, ClientSecret)
        assert eversend.api_token() == ApiToken("tok")

    def test_setters_chain(self):
        """Test every setter returns the builder."""
        builder = Eversend.builder("id", "secret")
        assert builder.set_base_url("http://x") is builder
        assert builder.set_api_token("t") is builder
        assert builder.set_transport(httpx.MockTransport(lambda r: httpx.Response(200))) is builder

    def test_shorthand_constructor(self):
        """Test Eversend(id, secret) needs no builder."""
        eversend = Eversend("id", "secret", base_url=BASE_URL)
        assert eversend.base_url == BASE_URL
        with pytest.raises(ApiTokenMissingError):
            eversend.api_token()


class TestApiToken:
    """Test token precondition and later setter."""

    def test_missing_token(self, eversend_without_token):
        """Test api_token() fails when no token was set."""
        with pytest.raises(ApiTokenMissingError):
            eversend_without_token.api_token()

    def test_with_api_token_returns_new_client(self, eversend_without_token):
        """Test with_api_token leaves the original client untouched."""
        authed = eversend_without_token.with_api_token("new_token")
        assert authed.api_token() == ApiToken("new_token")
        assert authed.base_url == eversend_without_token.base_url
        with pytest.raises(ApiTokenMissingError):
            eversend_without_token.api_token()

    @pytest.mark.asyncio
    async def test_missing_token_fails_before_network(self, mock_api, eversend_without_token):
        """Test no request is sent when bearer auth has no token."""
        mock_api.add("GET", "/wallets", {"data": [WALLET]})

        with pytest.raises(ApiTokenMissingError):
            await eversend_without_token.wallets().get_wallets()

        assert mock_api.requests == []


class TestFromSettings:
    """Test building from Settings."""

    def test_from_settings(self):
        """Test credentials, token and base URL come from settings."""
        env = {
            "EVERSEND_CLIENT_ID": "env-id",
            "EVERSEND_CLIENT_SECRET": "env-secret",
            "EVERSEND_API_TOKEN": "env-token",
            "EVERSEND_BASE_URL": "http://sandbox.test",
        }
        with patch.dict("os.environ", env, clear=True):
            eversend = Eversend.from_settings(Settings())

        assert eversend.client_id == ClientId("env-id")
        assert eversend.api_token() == ApiToken("env-token")
        assert eversend.base_url == "http://sandbox.test"

    def test_from_settings_requires_credentials(self):
        """Test missing credentials raise ValueError."""
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError):
                Eversend.from_settings(Settings())


class TestDispatch:
    """Test the shared request path."""

    def test_resource_accessors(self, eversend):
        """Test accessors return views over the same client."""
        assert isinstance(eversend.wallets(), Wallets)
        assert isinstance(eversend.accounts(), Accounts)
        assert eversend.payouts().eversend is eversend

    @pytest.mark.asyncio
    async def test_bearer_token_attached(self, mock_api, eversend):
        """Test the Authorization header carries the token."""
        mock_api.add("GET", "/wallets", {"code": 200, "data": [WALLET], "success": True})

        await eversend.wallets().get_wallets()

        assert mock_api.last_request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
        assert str(mock_api.last_request.url) == f"{BASE_URL}/wallets"

    @pytest.mark.asyncio
    async def test_unauthorized(self, mock_api, eversend):
        """Test a 401 yields UnauthorizedError."""
        mock_api.add("GET", "/wallets", {"message": "Unauthorized"}, status=401)

        with pytest.raises(UnauthorizedError):
            await eversend.wallets().get_wallets()

    @pytest.mark.asyncio
    async def test_server_error(self, mock_api, eversend):
        """Test a 500 yields RequestError."""
        mock_api.add("GET", "/account", {"message": "boom"}, status=500)

        with pytest.raises(RequestError) as exc_info:
            await eversend.accounts().get_profile()
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_error(self):
        """Test connection failures are wrapped in RequestError."""
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        eversend = (
            Eversend.builder("id", "secret")
            .set_base_url(BASE_URL)
            .set_api_token("tok")
            .set_transport(httpx.MockTransport(refuse))
            .build()
        )

        with pytest.raises(RequestError) as exc_info:
            await eversend.wallets().get_wallets()
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_malformed_body(self, mock_api, eversend):
        """Test a non-JSON 200 body yields RequestError."""
        mock_api.add("GET", "/wallets", "not json")

        with pytest.raises(RequestError):
            await eversend.wallets().get_wallets()

    @pytest.mark.asyncio
    async def test_missing_data(self, mock_api, eversend):
        """Test an envelope without data fails for data-returning operations."""
        mock_api.add("GET", "/account", {"code": 200, "success": True})

        with pytest.raises(RequestError):
            await eversend.accounts().get_profile()

    @pytest.mark.asyncio
    async def test_concurrent_operations(self, mock_api, eversend):
        """Test independent operations can run concurrently on one client."""
        mock_api.add("GET", "/wallets", {"data": [WALLET]})
        mock_api.add("GET", "/wallets/UGX", {"data": {"wallet": WALLET}})

        wallets, wallet = await asyncio.gather(
            eversend.wallets().get_wallets(),
            eversend.wallets().get_wallet("UGX"),
        )

        assert len(wallets) == 1
        assert wallet.currency == "UGX"
        assert len(mock_api.requests) == 2

    @pytest.mark.asyncio
    async def test_async_context_manager_closes(self, mock_api):
        """Test leaving the context closes the HTTP client."""
        from .conftest import build_client

        async with build_client(mock_api) as eversend:
            pass

        assert eversend._http.is_closed
