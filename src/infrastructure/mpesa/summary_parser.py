"""
M-Pesa SUMMARY section line parser

A summary row looks like:

    Send Money          4,630.00        157.00
    <transaction type>  <paid in>       <paid out>

Column gaps are irregular (wide in one place, a single space in another),
so the row is reduced to single-spaced words and the amounts are located
from the end of the row. Everything before them is the label.
"""

import re
import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from domain.entities.parsed_transaction import ParsedTransaction
from domain.enums import TransactionDirection
from infrastructure.mpesa.amounts import parse_amount, is_numeric_like

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")

RECEIVED_SUFFIX = " (Received)"
SENT_SUFFIX = " (Sent)"


class SummaryLineParser:
    """Parses one SUMMARY row into 0, 1 or 2 transactions"""

    def tokenize(self, line: str) -> list[str]:
        """Collapse runs of whitespace and split into words"""
        normalized = WHITESPACE_RE.sub(" ", line).strip()
        if not normalized:
            return []
        return normalized.split(" ")

    def split_columns(self, tokens: list[str]) -> Optional[tuple[str, str, str]]:
        """
        Resolve tokens into (label, paid_in, paid_out).

        Returns None when the row has no recognizable label and amount pair.
        """
        if len(tokens) < 3:
            logger.debug("Need at least 3 parts (type, paid in, paid out), got %d", len(tokens))
            return None

        if len(tokens) == 3:
            label, paid_in, paid_out = tokens
            return label.strip(), paid_in, paid_out

        numeric_indexes: list[int] = []
        for index in range(len(tokens) - 1, -1, -1):
            if is_numeric_like(tokens[index]):
                numeric_indexes.append(index)
                if len(numeric_indexes) == 2:
                    break

        if len(numeric_indexes) < 2:
            logger.debug("Could not find two amounts in %s", tokens)
            return None

        paid_out_index, paid_in_index = numeric_indexes
        label = " ".join(tokens[:paid_in_index]).strip()
        return label, tokens[paid_in_index], tokens[paid_out_index]

    def parse(self, line: str, statement_date: date) -> list[ParsedTransaction]:
        """
        Parse a summary row.

        Args:
            line: Candidate line from the SUMMARY section
            statement_date: Date given to every transaction from this statement

        Returns:
            INCOME transaction for a positive paid-in amount and EXPENSE
            transaction for a positive paid-out amount, in that order
        """
        if line.strip().upper().startswith("TOTAL"):
            logger.debug("Skipping TOTAL line: %s", line)
            return []

        tokens = self.tokenize(line)
        columns = self.split_columns(tokens)
        if columns is None:
            return []

        label, paid_in_text, paid_out_text = columns
        if not label:
            logger.debug("Could not extract transaction type from line: %s", line)
            return []

        transactions: list[ParsedTransaction] = []

        paid_in = parse_amount(paid_in_text)
        if self._is_positive(paid_in):
            transactions.append(ParsedTransaction(
                date=statement_date,
                description=label + RECEIVED_SUFFIX,
                amount=paid_in,
                direction=TransactionDirection.INCOME,
                external_reference="",
                raw_source_line=line,
            ))

        paid_out = parse_amount(paid_out_text)
        if self._is_positive(paid_out):
            transactions.append(ParsedTransaction(
                date=statement_date,
                description=label + SENT_SUFFIX,
                amount=paid_out,
                direction=TransactionDirection.EXPENSE,
                external_reference="",
                raw_source_line=line,
            ))

        if transactions:
            logger.debug("Parsed %d transactions from summary row '%s'", len(transactions), label)
        else:
            logger.debug("No valid amounts found in line: %s", line)

        return transactions

    @staticmethod
    def _is_positive(amount: Optional[Decimal]) -> bool:
        return amount is not None and amount > 0


def parse_summary_line(line: str, statement_date: date) -> list[ParsedTransaction]:
    """
    Convenience function to parse one summary row.

    Args:
        line: Summary row text
        statement_date: Statement date

    Returns:
        List of 0..2 parsed transactions
    """
    return SummaryLineParser().parse(line, statement_date)
