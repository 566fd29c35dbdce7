"""
M-Pesa statement parsing
"""
from .amounts import parse_amount, is_numeric_like
from .dates import parse_statement_date, find_statement_date
from .line_classifier import StatementLineClassifier, ClassifiedLine
from .summary_parser import SummaryLineParser, parse_summary_line
from .statement_parser import MpesaStatementParser

__all__ = [
    'parse_amount',
    'is_numeric_like',
    'parse_statement_date',
    'find_statement_date',
    'StatementLineClassifier',
    'ClassifiedLine',
    'SummaryLineParser',
    'parse_summary_line',
    'MpesaStatementParser',
]
