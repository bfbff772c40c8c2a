"""
Payout records and parameters.

Payouts follow the quotation flow: create a quotation for momo, bank or
Eversend delivery, then post a transaction carrying the quotation token.
"""

from typing import List, Optional

from pydantic import Field

from ..core.models import EversendModel


class PayoutBeneficiary(EversendModel):
    """Recipient embedded in a payout transaction; most fields may be missing."""

    id: Optional[int] = None
    country: Optional[str] = None
    first_name: str = Field(alias='firstName')
    last_name: str = Field(alias='lastName')
    phone_number: str = Field(alias='phoneNumber')
    created_at: Optional[str] = Field(default=None, alias='createdAt')
    updated_at: Optional[str] = Field(default=None, alias='updatedAt')
    bank_account_name: Optional[str] = Field(default=None, alias='bankAccountName')
    bank_account_number: Optional[str] = Field(default=None, alias='bankAccountNumber')
    bank_code: Optional[str] = Field(default=None, alias='bankCode')
    bank_name: Optional[str] = Field(default=None, alias='bankName')


class PayoutTransaction(EversendModel):
    transaction_id: str = Field(alias='transactionId')
    transaction_ref: Optional[str] = Field(default=None, alias='transactionRef')
    transaction_type: str = Field(alias='type')
    currency: str
    amount: float
    fees: Optional[float] = None
    user_id: Optional[int] = Field(default=None, alias='userId')
    balance_before: Optional[float] = Field(default=None, alias='balanceBefore')
    balance_after: Optional[float] = Field(default=None, alias='balanceAfter')
    beneficiary: Optional[PayoutBeneficiary] = None
    source_currency: Optional[str] = Field(default=None, alias='sourceCurrency')
    destination_amount: Optional[str] = Field(default=None, alias='destinationAmount')
    destination_country: Optional[str] = Field(default=None, alias='destinationCountry')
    destination_currency: Optional[str] = Field(default=None, alias='destinationCurrency')
    reason: Optional[str] = None
    status: str
    created_at: str = Field(alias='createdAt')
    updated_at: str = Field(alias='updatedAt')


class PayoutQuotation(EversendModel):
    amount: float
    amount_type: str = Field(alias='amountType')
    destination_amount: str = Field(alias='destinationAmount')
    destination_country: str = Field(alias='destinationCountry')
    destination_currency: str = Field(alias='destinationCurrency')
    exchange_rate: str = Field(alias='exchangeRate')
    source_amount: str = Field(alias='sourceAmount')
    source_country: str = Field(alias='sourceCountry')
    source_currency: str = Field(alias='sourceCurrency')
    total_amount: str = Field(alias='totalAmount')
    total_fees: str = Field(alias='totalFees')
    transaction_type: str = Field(alias='type')


class PayoutQuotationResult(EversendModel):
    quotation: PayoutQuotation
    token: str


class Branch(EversendModel):
    id: str
    name: str
    code: str
    city: str
    state: str


class Bank(EversendModel):
    id: str
    name: str
    active: bool
    code: Optional[str] = None
    branch: Optional[Branch] = None


class Country(EversendModel):
    """A payout destination. payment_types lists the wire names ('momo', 'bank' ...)."""

    id: str
    country: str
    name: str
    payment_types: List[str] = Field(alias='paymentTypes')
    phone_prefix: str = Field(alias='phonePrefix')


class CreatePayoutQuotationParams(EversendModel):
    """Momo or bank quotation; transaction_type is 'momo' or 'bank'."""

    amount: int
    amount_type: str = Field(alias='amountType')
    destination_country: str = Field(alias='destinationCountry')
    destination_currency: str = Field(alias='destinationCurrency')
    source_wallet: str = Field(alias='sourceWallet')
    transaction_type: str = Field(alias='type')


class CreateEversendPayoutQuotationParams(EversendModel):
    """Quotation for paying another Eversend user, identified by email, phone or tag."""

    amount: int
    amount_type: str = Field(alias='amountType')
    identifier: str
    source_wallet: str = Field(alias='sourceWallet')
    email: Optional[str] = None
    phone: Optional[str] = None
    tag: Optional[str] = None


class CreateMomoPayoutTransactionParams(EversendModel):
    country: str
    first_name: str = Field(alias='firstName')
    last_name: str = Field(alias='lastName')
    phone_number: str = Field(alias='phoneNumber')
    token: str
    transaction_ref: str = Field(alias='transactionRef')


class CreateBankPayoutTransactionParams(EversendModel):
    bank_account_name: str = Field(alias='bankAccountName')
    bank_account_number: str = Field(alias='bankAccountNumber')
    bank_code: str = Field(alias='bankCode')
    bank_name: str = Field(alias='bankName')
    country: str
    first_name: str = Field(alias='firstName')
    last_name: str = Field(alias='lastName')
    phone_number: str = Field(alias='phoneNumber')
    token: str
    transaction_ref: str = Field(alias='transactionRef')


class CreateBeneficiaryPayoutParams(EversendModel):
    beneficiary_id: str = Field(alias='beneficiaryId')
    token: str


class CreateEversendPayoutTransactionParams(EversendModel):
    token: str
    transaction_ref: str = Field(alias='transactionRef')


class PayoutTransactionResponseData(EversendModel):
    transaction: PayoutTransaction


class CountriesResponseData(EversendModel):
    countries: List[Country]
