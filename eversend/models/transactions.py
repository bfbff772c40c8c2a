"""
Transaction records, filters and paging parameters.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from ..core.models import EversendModel


class TransactionCurrency(str, Enum):
    GHS = 'GHS'
    KES = 'KES'
    NGN = 'NGN'
    RWF = 'RWF'
    TZS = 'TZS'
    UGX = 'UGX'
    USD = 'USD'


class TransactionType(str, Enum):
    COLLECTION = 'collection'
    EXCHANGE = 'exchange'
    PAYOUT = 'payout'


class TransactionStatus(str, Enum):
    FAILED = 'failed'
    PENDING = 'pending'
    SUCCESSFUL = 'successful'


class TransactionRange(str, Enum):
    DAY = 'day'
    WEEK = 'week'
    MONTH = 'month'
    YEAR = 'year'


class AccountBalance(EversendModel):
    after: str
    before: str


class TransactionAccount(EversendModel):
    amount: float
    balance: AccountBalance
    currency: TransactionCurrency


class TransactionMeta(EversendModel):
    source: TransactionAccount
    destination: TransactionAccount


class Transaction(EversendModel):
    """One ledger entry of the business account."""

    id: int
    transaction_id: str = Field(alias='transactionId')
    transaction_ref: Optional[str] = Field(default=None, alias='transactionRef')
    transaction_type: TransactionType = Field(alias='type')
    currency: TransactionCurrency
    amount: str
    fees: Optional[str] = None
    balance_before: Optional[str] = Field(default=None, alias='balanceBefore')
    balance_after: Optional[str] = Field(default=None, alias='balanceAfter')
    remit_one_id: Optional[str] = Field(default=None, alias='remitOneId')
    source_currency: Optional[str] = Field(default=None, alias='sourceCurrency')
    destination_currency: Optional[str] = Field(default=None, alias='destinationCurrency')
    destination_amount: Optional[str] = Field(default=None, alias='destinationAmount')
    source_country: Optional[str] = Field(default=None, alias='sourceCountry')
    destination_country: Optional[str] = Field(default=None, alias='destinationCountry')
    pesapot_id: Optional[str] = Field(default=None, alias='pesapotId')
    pesapot_response: Optional[Any] = Field(default=None, alias='pesapotResponse')
    merchant_id: Optional[str] = Field(default=None, alias='merchantId')
    account_id: int = Field(alias='accountId')
    user_id: Optional[int] = Field(default=None, alias='userId')
    beneficiary_id: Optional[int] = Field(default=None, alias='beneficiaryId')
    customer: Optional[Any] = None
    meta: Optional[TransactionMeta] = None
    reason: Optional[str] = None
    is_refunded: bool = Field(default=False, alias='isRefunded')
    status: TransactionStatus
    created_at: str = Field(alias='createdAt')
    updated_at: str = Field(alias='updatedAt')
    user: Optional[Any] = None
    beneficiary: Optional[Any] = None


class GetTransactionParams(EversendModel):
    transaction_id: str = Field(alias='transactionId')


class GetTransactionsParams(EversendModel):
    """Search filters; from/to are dates formatted YYYY-MM-DD."""

    currency: Optional[TransactionCurrency] = None
    from_date: Optional[str] = Field(default=None, alias='from')
    to_date: Optional[str] = Field(default=None, alias='to')
    limit: int = 10
    page: int = 1
    range: Optional[TransactionRange] = None
    search: Optional[str] = None
    transaction_status: Optional[TransactionStatus] = Field(default=None, alias='status')
    transaction_type: Optional[TransactionType] = Field(default=None, alias='type')


class TransactionResponseData(EversendModel):
    transactions: List[Transaction]


class TransactionsResponseData(EversendModel):
    transactions: List[Transaction]
    total_payouts: Optional[str] = None
    total_collections: Optional[str] = None
    balance: Optional[float] = None
    total: Optional[int] = None
    limit: Optional[int] = None
    page: Optional[int] = None
