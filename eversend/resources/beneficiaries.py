"""
Beneficiaries.

Saved payout recipients, plus account and bank lookups used before
creating one.
"""

from typing import List, Sequence

from ..core.exceptions import NotFoundError
from ..models.beneficiaries import (
    AccountStatusResponseData,
    BankDetails,
    BeneficiariesResponseData,
    Beneficiary,
    BeneficiaryResponseData,
    CheckAccountParams,
    CreateBeneficiaryParams,
    EditBeneficiaryParams,
    GetBankDetailsParams,
    GetBeneficiariesParams,
)
from .base import BaseResource


class Beneficiaries(BaseResource):

    async def check_eversend_account(self, params: CheckAccountParams) -> bool:
        """
        Check whether an Eversend account exists for an email or phone number.

        Pass only one of email and phone. The client does not enforce this;
        when both are sent the API matches on phone.

        Returns:
            True if the account exists
        """
        data = await self._fetch(
            'check_eversend_account', 'POST', '/beneficiaries/accounts/eversend',
            AccountStatusResponseData, params,
        )
        return data.account_exists

    async def create_beneficiaries(self, params: Sequence[CreateBeneficiaryParams]) -> None:
        """Create several beneficiaries in one request."""
        await self._execute('create_beneficiaries', 'POST', '/beneficiaries', list(params))

    async def create_beneficiary(self, params: CreateBeneficiaryParams) -> None:
        # The endpoint only accepts a list
        await self._execute('create_beneficiary', 'POST', '/beneficiaries', [params])

    async def delete_beneficiary(self, beneficiary_id: int) -> None:
        await self._execute('delete_beneficiary', 'DELETE', f'/beneficiaries/{beneficiary_id}')

    async def edit_beneficiary(self, beneficiary_id: int, params: EditBeneficiaryParams) -> None:
        await self._execute('edit_beneficiary', 'PUT', f'/beneficiaries/{beneficiary_id}', params)

    async def get_bank_details(self, params: GetBankDetailsParams) -> BankDetails:
        """Resolve the account holder name for a bank account number."""
        return await self._fetch(
            'get_bank_details', 'POST', '/beneficiaries/accounts/banks', BankDetails, params,
        )

    async def get_beneficiaries(self, params: GetBeneficiariesParams) -> List[Beneficiary]:
        """
        List beneficiaries.

        The filters travel as a JSON body on a GET request, which is what the
        API expects for this endpoint.
        """
        data = await self._fetch(
            'get_beneficiaries', 'GET', '/beneficiaries', BeneficiariesResponseData, params,
        )
        return data.beneficiaries

    async def get_beneficiary(self, beneficiary_id: int) -> Beneficiary:
        """
        Get one beneficiary.

        Raises:
            NotFoundError: If the API returned an empty beneficiary array
        """
        data = await self._fetch(
            'get_beneficiary', 'GET', f'/beneficiaries/{beneficiary_id}', BeneficiaryResponseData,
        )
        if isinstance(data.beneficiary, Beneficiary):
            return data.beneficiary
        if not data.beneficiary:
            raise NotFoundError('get_beneficiary', f"Beneficiary {beneficiary_id} not found")
        return data.beneficiary[0]
