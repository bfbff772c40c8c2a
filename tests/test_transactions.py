"""
Tests for transaction lookups.
"""

import pytest

from eversend import NotFoundError
from eversend.models.transactions import (
    GetTransactionParams,
    GetTransactionsParams,
    TransactionCurrency,
    TransactionRange,
    TransactionStatus,
    TransactionType,
)

TRANSACTION = {
    "id": 792,
    "transactionId": "BE31661876379861",
    "transactionRef": None,
    "type": "exchange",
    "currency": "UGX",
    "amount": "1000",
    "fees": "0",
    "accountId": 3,
    "status": "successful",
    "isRefunded": False,
    "meta": {
        "source": {"amount": 1000, "currency": "UGX", "balance": {"before": "2000", "after": "1000"}},
        "destination": {"amount": 0.27, "currency": "USD", "balance": {"before": "2000", "after": "2000.27"}},
    },
    "createdAt": "2022-08-30T16:19:39.000Z",
    "updatedAt": "2022-08-30T16:19:39.000Z",
}


class TestTransactions:
    """Test the transactions resource group."""

    @pytest.mark.asyncio
    async def test_get_transaction(self, mock_api, eversend):
        """Test the first matching transaction is returned with enums decoded."""
        mock_api.add("GET", "/transactions/BE31661876379861", {
            "code": 200, "data": {"transactions": [TRANSACTION]}, "success": True,
        })

        transaction = await eversend.transactions().get_transaction(
            GetTransactionParams(transaction_id="BE31661876379861")
        )

        assert transaction.id == 792
        assert transaction.transaction_type is TransactionType.EXCHANGE
        assert transaction.status is TransactionStatus.SUCCESSFUL
        assert transaction.meta.destination.currency is TransactionCurrency.USD

    @pytest.mark.asyncio
    async def test_get_transaction_not_found(self, mock_api, eversend):
        """Test an empty transactions array raises NotFoundError."""
        mock_api.add("GET", "/transactions/missing", {"data": {"transactions": []}})

        with pytest.raises(NotFoundError) as exc_info:
            await eversend.transactions().get_transaction(GetTransactionParams(transaction_id="missing"))
        assert exc_info.value.operation == "get_transaction"

    @pytest.mark.asyncio
    async def test_get_transactions_filters(self, mock_api, eversend):
        """Test filters serialize with wire names and enum values."""
        mock_api.add("POST", "/transactions", {"data": {
            "transactions": [TRANSACTION], "total": 1, "limit": 20, "page": 2,
        }})

        transactions = await eversend.transactions().get_transactions(GetTransactionsParams(
            currency=TransactionCurrency.UGX,
            from_date="2022-08-01",
            to_date="2022-08-31",
            limit=20,
            page=2,
            range=TransactionRange.MONTH,
            transaction_status=TransactionStatus.SUCCESSFUL,
            transaction_type=TransactionType.EXCHANGE,
        ))

        assert len(transactions) == 1
        assert mock_api.last_json() == {
            "currency": "UGX",
            "from": "2022-08-01",
            "to": "2022-08-31",
            "limit": 20,
            "page": 2,
            "range": "month",
            "status": "successful",
            "type": "exchange",
        }

    @pytest.mark.asyncio
    async def test_get_transactions_default_paging(self, mock_api, eversend):
        """Test an empty filter sends only page and limit."""
        mock_api.add("POST", "/transactions", {"data": {"transactions": []}})

        transactions = await eversend.transactions().get_transactions(GetTransactionsParams())

        assert transactions == []
        assert mock_api.last_json() == {"limit": 10, "page": 1}
