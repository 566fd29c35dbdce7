"""
Transaction Store Port Interface
Defines the persistence operations the import pipeline needs
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from domain.entities.category import Category
from domain.entities.transaction import Transaction


class ITransactionStore(ABC):
    """
    Port interface for transaction persistence
    Following Hexagonal Architecture - this is the application layer port
    """

    @abstractmethod
    async def find_existing_by_user_and_description_contains_and_date(
        self,
        user_id: str,
        fragment: str,
        on_date: date
    ) -> Optional[Transaction]:
        """
        Look up a stored transaction for duplicate detection

        Args:
            user_id: Owning user
            fragment: Text the stored description must contain (reference code)
            on_date: Date the stored transaction must have

        Returns:
            Matching transaction or None
        """
        pass

    @abstractmethod
    async def insert_transaction(self, transaction: Transaction) -> int:
        """
        Persist a new transaction

        Args:
            transaction: Unsaved transaction

        Returns:
            int: New transaction ID
        """
        pass

    @abstractmethod
    async def find_categories_for_user(self, user_id: str) -> list[Category]:
        """
        Get the user's own categories plus system default categories

        Args:
            user_id: Owning user

        Returns:
            List of categories
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check store health

        Returns:
            bool: True if the store is reachable
        """
        pass

    @abstractmethod
    async def close(self):
        """
        Release connections and cleanup resources
        """
        pass
