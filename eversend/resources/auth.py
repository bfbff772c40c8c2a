"""
Authentication.

The token endpoint is the only one authenticated with the raw client
credentials instead of a bearer token. Its answer is not enveloped.
"""

from typing import Optional

from ..core.models import EversendModel
from ..core.response import parse_model
from ..core.types import ApiToken
from .base import BaseResource


class ApiTokenResponse(EversendModel):
    status: Optional[int] = None
    token: str


class Auth(BaseResource):

    async def generate_api_token(self) -> ApiToken:
        """
        Request a new API token for the client's credentials.

        The token is not stored; feed it back through
        EversendBuilder.set_api_token or Eversend.with_api_token.

        Returns:
            The new ApiToken
        """
        response = await self.eversend.send(
            'GET',
            '/auth/token',
            authenticated=False,
            headers={
                'clientId': str(self.eversend.client_id),
                'clientSecret': str(self.eversend.client_secret),
            },
        )
        body = parse_model(response, ApiTokenResponse)
        self.logger.info("Generated a new API token")
        return ApiToken(body.token)
