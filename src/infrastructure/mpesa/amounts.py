"""
Amount parsing helpers for M-Pesa statements
All amounts are exact Decimals, never floats
"""

import math
import re
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

ZERO_LITERALS = {"0.00", "0"}
NON_NUMERIC_RE = re.compile(r"[^0-9.]")
CURRENCY_NOISE_RE = re.compile(r"KSHS|KSH|KES|[,\s]", re.IGNORECASE)


def parse_amount(token: Optional[str]) -> Optional[Decimal]:
    """
    Parse an amount cell into a Decimal.

    '4,630.00' -> Decimal('4630.00'), 'Ksh 157' -> Decimal('157.00').
    Earlier dots are treated as grouping noise, only the last one is the
    decimal point.

    Args:
        token: Raw cell text

    Returns:
        Decimal with 2 fractional digits, or None when there is no number
    """
    if token is None or not token.strip():
        return None

    if token.strip() in ZERO_LITERALS:
        return ZERO

    cleaned = NON_NUMERIC_RE.sub("", token)
    if not cleaned or cleaned == ".":
        logger.debug("No numeric content in amount '%s'", token)
        return None

    last_dot = cleaned.rfind(".")
    if last_dot > 0:
        cleaned = cleaned[:last_dot].replace(".", "") + cleaned[last_dot:]

    try:
        return Decimal(cleaned).quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        logger.debug("Could not parse amount '%s'", token)
        return None


def is_numeric_like(token: Optional[str]) -> bool:
    """
    Check whether a token looks like an amount column value.

    Currency markers, commas and whitespace are ignored.
    """
    if token is None:
        return False

    cleaned = CURRENCY_NOISE_RE.sub("", token)
    if not cleaned:
        return False

    try:
        return math.isfinite(float(cleaned))
    except ValueError:
        return False
