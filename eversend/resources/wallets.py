"""
Wallets.

Wallets are addressed by currency code.
"""

from typing import List

from ..models.wallets import (
    ActivateWalletParams,
    DeactivateWalletParams,
    Wallet,
    WalletResponseData,
)
from .base import BaseResource


class Wallets(BaseResource):

    async def get_wallets(self) -> List[Wallet]:
        """
        List all wallets, in the order the API returns them.

        Decoded like every other answer: the list is the envelope's data
        field, not a bare top-level array.
        """
        return await self._fetch('get_wallets', 'GET', '/wallets', List[Wallet])

    async def get_wallet(self, wallet_id: str) -> Wallet:
        """
        Get one wallet.

        Args:
            wallet_id: Currency code of the wallet, e.g. 'UGX'
        """
        data = await self._fetch('get_wallet', 'GET', f'/wallets/{wallet_id}', WalletResponseData)
        return data.wallet

    async def activate_wallet(self, params: ActivateWalletParams) -> Wallet:
        data = await self._fetch('activate_wallet', 'POST', '/wallets/activate', WalletResponseData, params)
        return data.wallet

    async def deactivate_wallet(self, params: DeactivateWalletParams) -> Wallet:
        data = await self._fetch('deactivate_wallet', 'POST', '/wallets/deactivate', WalletResponseData, params)
        return data.wallet
