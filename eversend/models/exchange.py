"""
Currency exchange records and parameters.

An exchange is two calls: create_quotation locks a rate and returns a token,
create_exchange commits it.
"""

from typing import Optional

from pydantic import Field

from ..core.models import EversendModel


class Quotation(EversendModel):
    """A time-limited price lock. The token is what create_exchange consumes."""

    token: str
    id: Optional[int] = None
    amount: Optional[float] = None
    from_currency: Optional[str] = Field(default=None, alias='from')
    to_currency: Optional[str] = Field(default=None, alias='to')
    rate: Optional[float] = None
    base_amount: Optional[float] = Field(default=None, alias='baseAmount')
    base_currency: Optional[str] = Field(default=None, alias='baseCurrency')
    base_wallet_after: Optional[float] = Field(default=None, alias='baseWalletAfter')
    base_wallet_before: Optional[float] = Field(default=None, alias='baseWalletBefore')
    dest_amount: Optional[float] = Field(default=None, alias='destAmount')
    dest_currency: Optional[str] = Field(default=None, alias='destCurrency')
    dest_wallet_after: Optional[float] = Field(default=None, alias='destWalletAfter')
    dest_wallet_before: Optional[float] = Field(default=None, alias='destWalletBefore')


class Balance(EversendModel):
    after: str
    before: str


class ExchangeAccount(EversendModel):
    amount: float
    currency: str
    balance: Balance


class Exchange(EversendModel):
    source: ExchangeAccount
    destination: ExchangeAccount


class CreateQuotationParams(EversendModel):
    amount: int
    from_currency: str = Field(alias='from')
    to_currency: str = Field(alias='to')


class CreateExchangeParams(EversendModel):
    token: str
