"""
Currency exchange.

Quotation then exchange are two independent calls; the caller passes the
quotation token from the first into the second.
"""

from ..models.exchange import (
    CreateExchangeParams,
    CreateQuotationParams,
    Exchange as ExchangeResult,
    Quotation,
)
from .base import BaseResource


class Exchange(BaseResource):

    async def create_quotation(self, params: CreateQuotationParams) -> Quotation:
        """Lock an exchange rate between two wallets."""
        return await self._fetch('create_quotation', 'POST', '/exchanges/quotation', Quotation, params)

    async def create_exchange(self, params: CreateExchangeParams) -> ExchangeResult:
        """Commit a quotation by its token."""
        return await self._fetch('create_exchange', 'POST', '/exchanges', ExchangeResult, params)
