"""Account profile."""

from ..models.accounts import Account
from .base import BaseResource


class Accounts(BaseResource):

    async def get_profile(self) -> Account:
        """Get the business account profile."""
        return await self._fetch('get_profile', 'GET', '/account', Account)
