"""Transaction document lookups."""

from __future__ import annotations

from collections.abc import Sequence

from ..models.transactions import TransactionsResponse
from ..operations import Operation
from ..query import QueryParams
from .base import ResourceBase

LIST_TRANSACTIONS = Operation(
    "RetrieveAllTransactions", "GET", "commerce/transactions", 200, TransactionsResponse
)
GET_TRANSACTIONS = Operation(
    "RetrieveSpecificTransactions", "GET", "commerce/transactions/{ids}", 200, TransactionsResponse
)


class TransactionsResource(ResourceBase):
    def list(self, params: QueryParams | None = None) -> TransactionsResponse:
        return self._list(
            LIST_TRANSACTIONS, params, ("cursor", "modified_after", "modified_before")
        )

    def get(self, transaction_ids: Sequence[str]) -> TransactionsResponse:
        return self._get_many(GET_TRANSACTIONS, transaction_ids, "transaction")
