"""
In-Memory Transaction Store
Implements ITransactionStore in process memory (fallback when PostgreSQL is not used)
"""

import itertools
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional

from application.ports.transaction_store import ITransactionStore
from domain.entities.category import Category
from domain.entities.transaction import Transaction


class InMemoryTransactionStore(ITransactionStore):
    """Dict-backed store; data lives as long as the process"""

    def __init__(self, categories: Optional[Iterable[Category]] = None):
        self.transactions: dict[int, Transaction] = {}
        self.categories: list[Category] = list(categories or [])
        self._ids = itertools.count(1)

    async def find_existing_by_user_and_description_contains_and_date(
        self,
        user_id: str,
        fragment: str,
        on_date: date
    ) -> Optional[Transaction]:
        for transaction in self.transactions.values():
            if (
                transaction.user_id == user_id
                and transaction.date == on_date
                and fragment in transaction.description
            ):
                return transaction
        return None

    async def insert_transaction(self, transaction: Transaction) -> int:
        transaction_id = next(self._ids)
        self.transactions[transaction_id] = replace(transaction, id=transaction_id)
        transaction.id = transaction_id
        return transaction_id

    async def find_categories_for_user(self, user_id: str) -> list[Category]:
        return [c for c in self.categories if c.user_id == user_id or c.is_default]

    def for_user(self, user_id: str) -> list[Transaction]:
        """Stored transactions of one user, newest date first"""
        owned = [t for t in self.transactions.values() if t.user_id == user_id]
        return sorted(owned, key=lambda t: t.date, reverse=True)

    async def health_check(self) -> bool:
        return True

    async def close(self):
        pass
