"""
Collection records and parameters.

Amounts in collection answers are decimal strings, kept verbatim.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from ..core.models import EversendModel


class CollectionMethod(str, Enum):
    MOMO = 'momo'
    BANK = 'bank'


class CollectionFees(EversendModel):
    amount: str
    amount_available_to_load: str
    charges: str
    currency: str
    max_load_amount: str
    max_limit: str
    min_load_amount: str
    new_balance: str
    payment_method: str
    total_to_pay: str


class MobileMoneyCollection(EversendModel):
    """A pending or settled mobile money collection."""

    amount: str
    balance_after: Optional[str] = Field(default=None, alias='balanceAfter')
    balance_before: Optional[str] = Field(default=None, alias='balanceBefore')
    created_at: str = Field(alias='createdAt')
    currency: str
    customer: Optional[Dict[str, Any]] = None
    status: str
    transaction_id: str = Field(alias='transactionId')
    transaction_ref: str = Field(alias='transactionRef')
    transaction_type: str = Field(alias='type')
    updated_at: str = Field(alias='updatedAt')


class Otp(EversendModel):
    pin: str
    pin_id: str = Field(alias='pinId')


class GetCollectionFeesParams(EversendModel):
    amount: int
    currency: str
    method: CollectionMethod


class GetCollectionOtpParams(EversendModel):
    phone_number: str = Field(alias='phone')


class GetMobileMoneyCollectionParams(EversendModel):
    """
    Parameters for a mobile money collection.

    The otp is only required for countries where the payer confirms with a PIN;
    request one first with get_collection_otp.
    """

    amount: int
    country: str
    currency: str
    phone_number: str = Field(alias='phone')
    customer: Optional[Dict[str, Any]] = None
    otp: Optional[Otp] = None
    redirect_url: Optional[str] = Field(default=None, alias='redirectUrl')
    transaction_ref: Optional[str] = Field(default=None, alias='transactionRef')


class CollectionOtpResponseData(EversendModel):
    pin_id: str = Field(alias='pinId')
