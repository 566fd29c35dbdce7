"""
PostgreSQL Transaction Store Adapter
Implements ITransactionStore port using asyncpg
"""

from datetime import date
from typing import Any, Optional

import asyncpg
from asyncpg.pool import Pool

from application.ports.transaction_store import ITransactionStore
from domain.entities.category import Category
from domain.entities.transaction import Transaction
from domain.enums import TransactionDirection


class PostgresTransactionStore(ITransactionStore):
    """
    PostgreSQL adapter implementing ITransactionStore port
    Uses asyncpg for async database operations
    """

    def __init__(self, connection_string: str, min_pool_size: int = 5, max_pool_size: int = 20):
        """
        Initialize PostgreSQL adapter

        Args:
            connection_string: PostgreSQL connection string
            min_pool_size: Minimum connection pool size
            max_pool_size: Maximum connection pool size
        """
        self.connection_string = connection_string
        self.min_pool_size = min_pool_size
        self.max_pool_size = max_pool_size
        self.pool: Optional[Pool] = None

    async def connect(self):
        """
        Establish database connection pool
        Must be called before using the adapter
        """
        if self.pool is None:
            self.pool = await asyncpg.create_pool(
                self.connection_string,
                min_size=self.min_pool_size,
                max_size=self.max_pool_size,
                command_timeout=60
            )

    def _require_pool(self) -> Pool:
        if self.pool is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.pool

    async def find_existing_by_user_and_description_contains_and_date(
        self,
        user_id: str,
        fragment: str,
        on_date: date
    ) -> Optional[Transaction]:
        """
        Duplicate lookup on the (user_id, date) index
        """
        pool = self._require_pool()

        query = """
            SELECT id, user_id, description, amount, date, type, category_id
            FROM transactions
            WHERE user_id = $1
              AND date = $2
              AND strpos(description, $3) > 0
            LIMIT 1
        """

        async with pool.acquire() as conn:
            row = await conn.fetchrow(query, user_id, on_date, fragment)

        if row is None:
            return None

        return self._row_to_transaction(row)

    async def insert_transaction(self, transaction: Transaction) -> int:
        """
        Save a transaction
        """
        pool = self._require_pool()

        query = """
            INSERT INTO transactions (
                user_id, description, amount, date, type, category_id, created_at
            ) VALUES (
                $1, $2, $3, $4, $5, $6, NOW()
            )
            RETURNING id
        """

        async with pool.acquire() as conn:
            transaction_id = await conn.fetchval(
                query,
                transaction.user_id,
                transaction.description,
                transaction.amount,
                transaction.date,
                transaction.direction.value,
                transaction.category_id
            )

        transaction.id = transaction_id
        return transaction_id

    async def find_categories_for_user(self, user_id: str) -> list[Category]:
        """
        User categories plus system defaults
        """
        pool = self._require_pool()

        query = """
            SELECT id, user_id, name, description, color, icon, is_default
            FROM categories
            WHERE user_id = $1 OR is_default = TRUE
            ORDER BY is_default ASC, id ASC
        """

        async with pool.acquire() as conn:
            rows = await conn.fetch(query, user_id)

        return [
            Category(
                id=row["id"],
                name=row["name"],
                user_id=row["user_id"],
                is_default=row["is_default"],
                description=row["description"],
                color=row["color"],
                icon=row["icon"]
            )
            for row in rows
        ]

    async def health_check(self) -> bool:
        """
        Check database connection health
        """
        if self.pool is None:
            return False

        try:
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except Exception:
            return False

    async def close(self):
        """
        Close database connection pool
        """
        if self.pool is not None:
            await self.pool.close()
            self.pool = None

    @staticmethod
    def _row_to_transaction(row: Any) -> Transaction:
        return Transaction(
            id=row["id"],
            user_id=row["user_id"],
            description=row["description"],
            amount=row["amount"],
            date=row["date"],
            direction=TransactionDirection(row["type"]),
            category_id=row["category_id"]
        )
