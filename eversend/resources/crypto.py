"""Crypto addresses, asset chains and crypto transactions."""

from typing import List

from ..models.crypto import (
    AssetChains,
    AssetChainsResponseData,
    CreateCryptoAddressParams,
    CryptoAddress,
    CryptoAddressesResponseData,
    CryptoAddressResponseData,
    CryptoTransaction,
    CryptoTransactionsResponseData,
    FetchAssetChainsParams,
)
from .base import BaseResource


class Crypto(BaseResource):

    async def create_crypto_address(self, params: CreateCryptoAddressParams) -> CryptoAddress:
        data = await self._fetch(
            'create_crypto_address', 'POST', '/crypto/addresses', CryptoAddressResponseData, params,
        )
        return data.address

    async def fetch_asset_chains(self, params: FetchAssetChainsParams) -> AssetChains:
        """Get the chain identifiers available for a coin (e.g. 'USDT')."""
        data = await self._fetch(
            'fetch_asset_chains', 'GET', f'/crypto/assets/{params.coin}', AssetChainsResponseData,
        )
        return data.chains

    async def fetch_crypto_addresses(self) -> List[CryptoAddress]:
        data = await self._fetch(
            'fetch_crypto_addresses', 'GET', '/crypto/addresses', CryptoAddressesResponseData,
        )
        return data.addresses

    async def fetch_crypto_transactions(self) -> List[CryptoTransaction]:
        data = await self._fetch(
            'fetch_crypto_transactions', 'GET', '/crypto/transactions', CryptoTransactionsResponseData,
        )
        return data.transactions
