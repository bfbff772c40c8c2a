"""
Wallet records and parameters.

A wallet is identified by its currency code (e.g. 'UGX', 'USD').
"""

from pydantic import Field

from ..core.models import EversendModel


class Wallet(EversendModel):
    """A currency wallet held by the business account."""

    currency: str
    currency_type: str = Field(alias='currencyType')
    amount: float
    enabled: bool
    name: str
    icon: str
    amount_in_base_currency: float = Field(alias='amountInBaseCurrency')
    is_main: bool = Field(alias='isMain')


class ActivateWalletParams(EversendModel):
    wallet: str


class DeactivateWalletParams(EversendModel):
    wallet: str


class WalletResponseData(EversendModel):
    wallet: Wallet
