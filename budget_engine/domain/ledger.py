"""Ledger - ordered, append-only record of transactions"""

import uuid
from datetime import date
from typing import Any, Iterator, List, Optional, Tuple
from budget_engine.domain.catalog import CategoryCatalog, DEFAULT_CATALOG
from budget_engine.domain.exceptions import NotFoundError
from budget_engine.domain.models import Transaction
from budget_engine.domain.validation import (
    parse_amount,
    parse_category,
    parse_date,
    parse_description,
    parse_kind,
)


class Ledger:
    """
    Holds transactions in insertion order.

    Transactions are frozen; correcting an entry means removing it and
    adding a new one.
    """

    def __init__(self, catalog: CategoryCatalog = DEFAULT_CATALOG):
        self.catalog = catalog
        self._transactions: List[Transaction] = []

    def add_transaction(
        self,
        kind: Any,
        amount: Any,
        category: Any,
        description: Any,
        date: Optional[date] = None,
    ) -> Transaction:
        """
        Validate and append a new transaction.

        Raises:
            ValidationError: On bad kind, amount, category, description or date.
                The ledger is left unchanged.
        """
        txn_kind = parse_kind(kind)
        txn = Transaction(
            id=str(uuid.uuid4()),
            kind=txn_kind,
            amount=parse_amount(amount),
            category=parse_category(self.catalog, txn_kind, category),
            description=parse_description(description),
            date=parse_date(date),
        )
        self._transactions.append(txn)
        return txn

    def remove_transaction(self, transaction_id: str) -> Transaction:
        for i, txn in enumerate(self._transactions):
            if txn.id == transaction_id:
                return self._transactions.pop(i)
        raise NotFoundError(f"Transaction {transaction_id} not found")

    def list_transactions(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def recent_transactions(self, limit: int = 10) -> List[Transaction]:
        """Last `limit` transactions, most recently added first"""
        if limit <= 0:
            return []
        return list(reversed(self._transactions[-limit:]))

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)
