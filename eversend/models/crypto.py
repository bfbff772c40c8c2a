"""Crypto address and transaction records."""

from typing import List, Optional

from pydantic import Field

from ..core.models import EversendModel


class CryptoAddress(EversendModel):
    address: str
    coin: str
    destination_address_description: str = Field(alias='destinationAddressDescription')
    purpose: Optional[str] = None
    owner_name: str = Field(alias='ownerName')
    created_at: str = Field(alias='createdAt')
    updated_at: str = Field(alias='updatedAt')


class AssetChains(EversendModel):
    """Chain identifiers for one coin, keyed by the network's display name."""

    binance_smart_chain: Optional[str] = Field(default=None, alias='Binance Smart Chain (BEP20)')
    ethereum: Optional[str] = Field(default=None, alias='Ethereum (ERC20)')
    tron: Optional[str] = Field(default=None, alias='TRON (TRC20)')


class CryptoTransactionMeta(EversendModel):
    actual_coin: str = Field(alias='actualCoin')
    amount: float
    blockchain_hash: str = Field(alias='blockchainHash')
    blockchain_status: str = Field(alias='blockchainStatus')
    blockchain_sub_status: str = Field(alias='blockchainSubStatus')
    charges: float
    country: str
    creation_date: str = Field(alias='creationDate')
    currency: str
    date: str
    eversend_ref: str = Field(alias='eversendRef')
    fees: str
    fireblocks_id: str = Field(alias='fireblocksId')
    processor: str
    source: str
    topped_up: bool = Field(alias='toppedUp')
    topped_up_date: Optional[str] = Field(default=None, alias='toppedUpDate')
    total_to_pay: float = Field(alias='totalToPay')
    transaction_type: str = Field(alias='type')
    username: str


class CryptoTransaction(EversendModel):
    id: int
    account_id: int = Field(alias='accountId')
    address: CryptoAddress
    address_id: int = Field(alias='addressId')
    amount: str
    transaction_id: str = Field(alias='transactionId')
    meta: CryptoTransactionMeta
    status: str
    sub_status: Optional[str] = Field(default=None, alias='subStatus')
    created_at: str = Field(alias='createdAt')
    updated_at: str = Field(alias='updatedAt')


class CreateCryptoAddressParams(EversendModel):
    asset_id: str = Field(alias='assetId')
    destination_address_description: str = Field(alias='destinationAddressDescription')
    owner_name: str = Field(alias='ownerName')
    purpose: Optional[str] = None


class FetchAssetChainsParams(EversendModel):
    coin: str


class CryptoAddressResponseData(EversendModel):
    address: CryptoAddress


class CryptoAddressesResponseData(EversendModel):
    addresses: List[CryptoAddress]
    total: Optional[int] = None
    limit: Optional[int] = None
    page: Optional[int] = None


class AssetChainsResponseData(EversendModel):
    chains: AssetChains


class CryptoTransactionsResponseData(EversendModel):
    transactions: List[CryptoTransaction]
    total: Optional[int] = None
    limit: Optional[int] = None
    page: Optional[int] = None
