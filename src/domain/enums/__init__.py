"""Domain enumerations"""

from .section_state import SectionState
from .transaction_direction import TransactionDirection

__all__ = [
    "SectionState",
    "TransactionDirection",
]
