"""Transaction Direction Enumeration

Whether money came into or left the wallet.
"""

from enum import Enum


class TransactionDirection(str, Enum):
    """Direction of a transaction

    INCOME: Paid-in column of the statement (money received)
    EXPENSE: Paid-out column of the statement (money sent)
    """

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    def __str__(self) -> str:
        return self.value
