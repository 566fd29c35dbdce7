"""
Domain Entity: Parsed Transaction
A transaction read from a statement that has not been persisted yet
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from domain.enums import TransactionDirection


@dataclass(frozen=True)
class ParsedTransaction:
    """Candidate transaction produced by the statement parser"""

    date: date
    description: str
    amount: Decimal
    direction: TransactionDirection
    external_reference: str = ""
    raw_source_line: str = ""

    def __post_init__(self):
        if self.amount <= 0:
            raise ValueError(f"Parsed transaction amount must be positive, got {self.amount}")

    @property
    def is_income(self) -> bool:
        return self.direction == TransactionDirection.INCOME

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "date": self.date.isoformat(),
            "description": self.description,
            "amount": str(self.amount),
            "direction": self.direction.value,
            "external_reference": self.external_reference,
            "raw_source_line": self.raw_source_line,
        }
