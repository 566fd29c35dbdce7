"""
Domain Entity: Transaction
A transaction owned by a user in the transaction store
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from domain.enums import TransactionDirection


@dataclass
class Transaction:
    """Persisted income/expense record"""

    user_id: str
    description: str
    amount: Decimal
    date: date
    direction: TransactionDirection
    category_id: Optional[int] = None
    id: Optional[int] = None

    @classmethod
    def from_parsed(cls, parsed, user_id: str, category_id: Optional[int] = None) -> "Transaction":
        """Build a new (unsaved) record from a parsed statement row"""
        return cls(
            user_id=user_id,
            description=parsed.description,
            amount=parsed.amount,
            date=parsed.date,
            direction=parsed.direction,
            category_id=category_id,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "description": self.description,
            "amount": str(self.amount),
            "date": self.date.isoformat(),
            "type": self.direction.value,
            "category_id": self.category_id,
        }
