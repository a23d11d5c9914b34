"""
Decimal price parsing.
"""
from __future__ import annotations

import logging
import re
from decimal import Decimal
from fractions import Fraction

from app.pipeline.errors import MalformedPrice

logger = logging.getLogger(__name__)

ZERO = Decimal(0)

# plain fixed-point notation only: "6.49", "12", "-0.50", ".25"
DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)


def parse_price(text: str) -> Decimal:
    """Parse a decimal string such as ``"6.49"`` into an exact ``Decimal``.

    Raises ``MalformedPrice`` for anything that is not a fixed-point number.
    """
    if not isinstance(text, str) or not DECIMAL_RE.fullmatch(text.strip()):
        raise MalformedPrice(text)
    return Decimal(text.strip())


def price_or_zero(text: str) -> Decimal:
    """Like :func:`parse_price`, but a malformed value counts as zero."""
    try:
        return parse_price(text)
    except MalformedPrice as exc:
        logger.warning("%s, counting as 0", exc)
        return ZERO


def is_multiple_of(value: Decimal, step: Decimal) -> bool:
    # Fraction keeps the check exact for any number of digits
    return (Fraction(value) / Fraction(step)).denominator == 1
