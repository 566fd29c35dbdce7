"""
Port: Statement Parser Interface
Turns extracted statement text into candidate transactions
"""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

from domain.entities.parsed_transaction import ParsedTransaction


class IStatementParser(ABC):
    """Interface for statement text parsers"""

    @abstractmethod
    def parse(self, text: str, today: Optional[date] = None) -> list[ParsedTransaction]:
        """
        Parse statement text

        Args:
            text: Full extracted statement text
            today: Fallback date when the statement date cannot be read

        Returns:
            Candidate transactions in statement order
        """
        pass
