"""
Beneficiary records and parameters.
"""

from typing import List, Optional, Union

from pydantic import Field

from ..core.models import EversendModel


class Beneficiary(EversendModel):
    """A saved payout recipient, as returned by the beneficiaries endpoints."""

    id: int
    first_name: str = Field(alias='firstName')
    last_name: str = Field(alias='lastName')
    email: Optional[str] = None
    phone_number: str = Field(alias='phoneNumber')
    bank_name: Optional[str] = Field(default=None, alias='bankName')
    bank_code: Optional[str] = Field(default=None, alias='bankCode')
    bank_account_name: Optional[str] = Field(default=None, alias='bankAccountName')
    bank_account_number: Optional[str] = Field(default=None, alias='bankAccountNumber')
    country: str
    is_eversend: bool = Field(alias='isEversend')
    avatar: Optional[str] = None
    is_bank: bool = Field(alias='isBank')
    is_momo: bool = Field(alias='isMomo')


class BankDetails(EversendModel):
    account_name: str = Field(alias='accountName')
    account_number: str = Field(alias='accountNumber')
    bank_code: str = Field(alias='bankCode')


class CheckAccountParams(EversendModel):
    """
    Lookup of an Eversend account by email or phone.

    Supply exactly one of the two. When both are sent the API matches on phone.
    """

    email: Optional[str] = None
    phone: Optional[str] = None


class CreateBeneficiaryParams(EversendModel):
    first_name: str = Field(alias='firstName')
    last_name: str = Field(alias='lastName')
    country: str
    phone_number: str = Field(alias='phoneNumber')
    is_bank: bool = Field(alias='isBank')
    is_momo: bool = Field(alias='isMomo')
    bank_account_name: Optional[str] = Field(default=None, alias='bankAccountName')
    bank_account_number: Optional[str] = Field(default=None, alias='bankAccountNumber')


class EditBeneficiaryParams(EversendModel):
    first_name: str = Field(alias='firstName')
    last_name: str = Field(alias='lastName')
    phone_number: str = Field(alias='phoneNumber')
    bank_name: Optional[str] = Field(default=None, alias='bankName')
    bank_code: Optional[str] = Field(default=None, alias='bankCode')
    bank_account_name: Optional[str] = Field(default=None, alias='bankAccountName')
    bank_account_number: Optional[str] = Field(default=None, alias='bankAccountNumber')


class GetBankDetailsParams(EversendModel):
    account_number: str = Field(alias='accountNumber')
    bank_code: str = Field(alias='bankCode')
    country_code: str = Field(alias='countryCode')


class GetBeneficiariesParams(EversendModel):
    """Filters and paging for the beneficiary list (type is 'momo' or 'bank')."""

    beneficiary_type: Optional[str] = Field(default=None, alias='type')
    search: Optional[str] = None
    limit: int = 100
    page: int = 1


class BeneficiariesResponseData(EversendModel):
    beneficiaries: List[Beneficiary]


class BeneficiaryResponseData(EversendModel):
    # The single lookup has been seen both as an array and as one object
    beneficiary: Union[List[Beneficiary], Beneficiary]


class AccountStatusResponseData(EversendModel):
    account_exists: bool = Field(alias='accountExists')
