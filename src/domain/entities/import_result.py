"""
Domain Entity: Import Result
Summary of a single statement import
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ImportResult:
    """Counters and totals returned by one import call

    saved_count + skipped_count always equals total_parsed.
    Totals only cover saved transactions.
    """

    total_parsed: int = 0
    saved_count: int = 0
    skipped_count: int = 0
    total_income: Decimal = Decimal("0.00")
    total_expense: Decimal = Decimal("0.00")

    def __post_init__(self):
        if self.saved_count + self.skipped_count != self.total_parsed:
            raise ValueError(
                f"saved ({self.saved_count}) + skipped ({self.skipped_count}) "
                f"!= parsed ({self.total_parsed})"
            )

    @classmethod
    def empty(cls) -> "ImportResult":
        return cls()

    @property
    def no_transactions_found(self) -> bool:
        return self.total_parsed == 0

    @property
    def message(self) -> str:
        if self.no_transactions_found:
            return "Statement processed successfully - no new transactions found"
        return f"Statement processed successfully! Imported {self.saved_count} transactions"

    def to_response(self) -> dict:
        """Field names used by the HTTP layer"""
        return {
            "success": True,
            "message": self.message,
            "totalTransactions": self.total_parsed,
            "savedTransactions": self.saved_count,
            "skippedTransactions": self.skipped_count,
            "totalIncome": self.total_income,
            "totalExpense": self.total_expense,
        }
