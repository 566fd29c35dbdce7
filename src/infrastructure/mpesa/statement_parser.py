"""
Infrastructure Adapter: M-Pesa Statement Parser
Implements IStatementParser for Safaricom M-Pesa full statements
"""

import logging
from datetime import date
from typing import Optional

from application.ports.statement_parser import IStatementParser
from domain.entities.parsed_transaction import ParsedTransaction
from infrastructure.mpesa.dates import find_statement_date
from infrastructure.mpesa.line_classifier import StatementLineClassifier
from infrastructure.mpesa.summary_parser import SummaryLineParser

logger = logging.getLogger(__name__)


class MpesaStatementParser(IStatementParser):
    """
    Reads the SUMMARY table of an M-Pesa statement.

    Every summary row is dated with the statement date. The detailed
    statement is not parsed.
    """

    def __init__(
        self,
        classifier: Optional[StatementLineClassifier] = None,
        line_parser: Optional[SummaryLineParser] = None
    ):
        self.classifier = classifier or StatementLineClassifier()
        self.line_parser = line_parser or SummaryLineParser()

    def parse(self, text: str, today: Optional[date] = None) -> list[ParsedTransaction]:
        statement_date = find_statement_date(text.splitlines(), today)

        transactions: list[ParsedTransaction] = []
        for line in self.classifier.summary_lines(text):
            transactions.extend(self.line_parser.parse(line, statement_date))

        logger.info("Total transactions parsed from summary: %d", len(transactions))
        return transactions
