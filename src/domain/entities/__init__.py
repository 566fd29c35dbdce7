"""Domain entities"""

from .category import Category
from .import_result import ImportResult
from .parsed_transaction import ParsedTransaction
from .transaction import Transaction

__all__ = [
    "Category",
    "ImportResult",
    "ParsedTransaction",
    "Transaction",
]
