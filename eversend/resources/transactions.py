"""Transactions of the business account."""

from typing import List

from ..core.exceptions import NotFoundError
from ..models.transactions import (
    GetTransactionParams,
    GetTransactionsParams,
    Transaction,
    TransactionResponseData,
    TransactionsResponseData,
)
from .base import BaseResource


class Transactions(BaseResource):

    async def get_transaction(self, params: GetTransactionParams) -> Transaction:
        """
        Get one transaction by its transaction id.

        Raises:
            NotFoundError: If the API returned an empty transactions array
        """
        data = await self._fetch(
            'get_transaction', 'GET', f'/transactions/{params.transaction_id}', TransactionResponseData,
        )
        if not data.transactions:
            raise NotFoundError('get_transaction', f"Transaction {params.transaction_id} not found")
        return data.transactions[0]

    async def get_transactions(self, params: GetTransactionsParams) -> List[Transaction]:
        """Search transactions; paging is passed through as page and limit."""
        data = await self._fetch(
            'get_transactions', 'POST', '/transactions', TransactionsResponseData, params,
        )
        return data.transactions
