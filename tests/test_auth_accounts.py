"""
Tests for authentication and the account profile.
"""

import pytest

from eversend import ApiToken, RequestError, UnauthorizedError


PROFILE = {
    "id": 3,
    "name": "Eversend",
    "email": "frank@eversend.co",
    "phone": "+256789123456",
    "address": "Plot 1, Kampala Road",
    "town": "Kampala",
    "country": "UG",
    "logo": None,
    "website": "https://eversend.co",
    "isVerified": True,
}


class TestAuth:
    """Test API token generation."""

    @pytest.mark.asyncio
    async def test_generate_api_token(self, mock_api, eversend_without_token):
        """Test the token is read from the unenveloped body."""
        mock_api.add("GET", "/auth/token", {"status": 200, "token": "some_test_token"})

        token = await eversend_without_token.auth().generate_api_token()

        assert token == ApiToken("some_test_token")

    @pytest.mark.asyncio
    async def test_sends_client_credentials_as_headers(self, mock_api, eversend_without_token):
        """Test credentials travel as clientId/clientSecret and no bearer is sent."""
        mock_api.add("GET", "/auth/token", {"token": "t"})

        await eversend_without_token.auth().generate_api_token()

        headers = mock_api.last_request.headers
        assert headers["clientId"] == "sk_example_123456789"
        assert headers["clientSecret"] == "sk_example_123456780"
        assert "Authorization" not in headers

    @pytest.mark.asyncio
    async def test_token_can_be_fed_back(self, mock_api, eversend_without_token):
        """Test a generated token authorizes later calls."""
        mock_api.add("GET", "/auth/token", {"token": "fresh"})
        mock_api.add("GET", "/account", {"code": 200, "data": PROFILE, "success": True})

        token = await eversend_without_token.auth().generate_api_token()
        authed = eversend_without_token.with_api_token(token)
        await authed.accounts().get_profile()

        assert mock_api.last_request.headers["Authorization"] == "Bearer fresh"

    @pytest.mark.asyncio
    async def test_bad_credentials(self, mock_api, eversend_without_token):
        """Test rejected credentials raise UnauthorizedError."""
        mock_api.add("GET", "/auth/token", {"message": "invalid credentials"}, status=401)

        with pytest.raises(UnauthorizedError):
            await eversend_without_token.auth().generate_api_token()

    @pytest.mark.asyncio
    async def test_body_without_token(self, mock_api, eversend_without_token):
        """Test a body lacking the token is a RequestError."""
        mock_api.add("GET", "/auth/token", {"status": 200})

        with pytest.raises(RequestError):
            await eversend_without_token.auth().generate_api_token()


class TestAccounts:
    """Test the account profile."""

    @pytest.mark.asyncio
    async def test_get_profile(self, mock_api, eversend):
        """Test profile fields map from wire names."""
        mock_api.add("GET", "/account", {"code": 200, "data": PROFILE, "success": True})

        profile = await eversend.accounts().get_profile()

        assert profile.id == 3
        assert profile.name == "Eversend"
        assert profile.email == "frank@eversend.co"
        assert profile.is_verified is True
        assert profile.logo is None
