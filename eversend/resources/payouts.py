"""
Payouts.

Every payout transaction consumes the token of a prior payout quotation.
All transaction variants post to the same /payouts endpoint; the body
shape selects the delivery method.
"""

from typing import List

from ..models.payouts import (
    Bank,
    CountriesResponseData,
    Country,
    CreateBankPayoutTransactionParams,
    CreateBeneficiaryPayoutParams,
    CreateEversendPayoutQuotationParams,
    CreateEversendPayoutTransactionParams,
    CreateMomoPayoutTransactionParams,
    CreatePayoutQuotationParams,
    PayoutQuotationResult,
    PayoutTransaction,
    PayoutTransactionResponseData,
)
from .base import BaseResource


class Payouts(BaseResource):

    async def create_momo_and_bank_payout_quotation(
        self,
        params: CreatePayoutQuotationParams,
    ) -> PayoutQuotationResult:
        return await self._fetch(
            'create_momo_and_bank_payout_quotation', 'POST', '/payouts/quotation',
            PayoutQuotationResult, params,
        )

    async def create_eversend_payout_quotation(
        self,
        params: CreateEversendPayoutQuotationParams,
    ) -> PayoutQuotationResult:
        return await self._fetch(
            'create_eversend_payout_quotation', 'POST', '/payouts/quotation',
            PayoutQuotationResult, params,
        )

    async def _create_transaction(self, operation: str, params) -> PayoutTransaction:
        data = await self._fetch(operation, 'POST', '/payouts', PayoutTransactionResponseData, params)
        self.logger.info(f"{operation}: created payout {data.transaction.transaction_id}")
        return data.transaction

    async def create_momo_payout_transaction(
        self,
        params: CreateMomoPayoutTransactionParams,
    ) -> PayoutTransaction:
        return await self._create_transaction('create_momo_payout_transaction', params)

    async def create_bank_payout_transaction(
        self,
        params: CreateBankPayoutTransactionParams,
    ) -> PayoutTransaction:
        return await self._create_transaction('create_bank_payout_transaction', params)

    async def create_beneficiary_payout_transaction(
        self,
        params: CreateBeneficiaryPayoutParams,
    ) -> PayoutTransaction:
        return await self._create_transaction('create_beneficiary_payout_transaction', params)

    async def create_eversend_payout_transaction(
        self,
        params: CreateEversendPayoutTransactionParams,
    ) -> PayoutTransaction:
        return await self._create_transaction('create_eversend_payout_transaction', params)

    async def get_delivery_banks(self, country: str) -> List[Bank]:
        """
        List the banks payouts can be delivered to in a country.

        Args:
            country: ISO country code, e.g. 'NG'
        """
        return await self._fetch('get_delivery_banks', 'GET', f'/payouts/banks/{country}', List[Bank])

    async def get_delivery_countries(self) -> List[Country]:
        data = await self._fetch('get_delivery_countries', 'GET', '/payouts/countries', CountriesResponseData)
        return data.countries
