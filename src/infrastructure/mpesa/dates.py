"""
Statement date parsing
Header format: "Date of Statement:     21st 10 2025"
"""

import re
import logging
from datetime import date
from typing import Optional

logger = logging.getLogger(__name__)

STATEMENT_DATE_MARKER = "Date of Statement:"
ORDINAL_RE = re.compile(r"(\d+)(st|nd|rd|th)\b", re.IGNORECASE)


def parse_statement_date(line: str, today: Optional[date] = None) -> date:
    """
    Parse the statement date header line.

    Tokens after the first ':' are read as day, month, year. Any failure
    falls back to today so one odd header never fails a whole import.

    Args:
        line: Header line containing the date
        today: Fallback date (defaults to date.today())

    Returns:
        Parsed date or the fallback
    """
    fallback = today or date.today()

    _, sep, value = line.partition(":")
    if not sep:
        logger.debug("No ':' in statement date line: %s", line)
        return fallback

    value = ORDINAL_RE.sub(r"\1", value.strip())
    parts = value.split()
    if len(parts) < 3:
        logger.debug("Statement date line has too few parts: %s", line)
        return fallback

    try:
        day, month, year = (int(p) for p in parts[:3])
        return date(year, month, day)
    except (ValueError, OverflowError):
        logger.debug("Could not parse statement date from: %s", line)
        return fallback


def find_statement_date(lines: list[str], today: Optional[date] = None) -> date:
    """Statement date from the first header line that carries one"""
    for line in lines:
        if STATEMENT_DATE_MARKER in line:
            statement_date = parse_statement_date(line, today)
            logger.info("Found statement date: %s", statement_date)
            return statement_date
    return today or date.today()
