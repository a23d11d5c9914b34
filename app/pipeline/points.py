"""
Rule-based point scoring.

Every rule is independent and additive; ``calculate_points`` sums them.
Malformed totals, prices, dates and times never abort scoring: they count
as zero values for the rule that reads them.
"""
from __future__ import annotations

import logging
import math
import re
from datetime import datetime
from decimal import Decimal
from fractions import Fraction

from app.pipeline.errors import MalformedDate, MalformedTime
from app.pipeline.prices import is_multiple_of, price_or_zero
from app.schemas import Item, Receipt

logger = logging.getLogger(__name__)

ALNUM_RE = re.compile(r"[A-Za-z0-9]")

# two-digit fields only: "2022-1-3" and "14:5" are malformed
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
QUARTER = Decimal("0.25")
ITEM_PAIR_POINTS = 5
DESCRIPTION_MULTIPLIER = Fraction(1, 5)
ODD_DAY_POINTS = 6
AFTERNOON_HOUR = 14
AFTERNOON_POINTS = 10


# ---------------------------------------------------------------------------
# Field readers
# ---------------------------------------------------------------------------

def parse_purchase_day(text: str) -> int:
    """Day of month of a ``YYYY-MM-DD`` date; raises ``MalformedDate``."""
    if not isinstance(text, str) or not DATE_RE.fullmatch(text):
        raise MalformedDate(text)
    try:
        return datetime.strptime(text, "%Y-%m-%d").day
    except ValueError as exc:
        raise MalformedDate(text) from exc


def parse_purchase_hour(text: str) -> int:
    """Hour of a 24h ``HH:MM`` time; raises ``MalformedTime``."""
    if not isinstance(text, str) or not TIME_RE.fullmatch(text):
        raise MalformedTime(text)
    try:
        return datetime.strptime(text, "%H:%M").hour
    except ValueError as exc:
        raise MalformedTime(text) from exc


def _day_or_zero(text: str) -> int:
    try:
        return parse_purchase_day(text)
    except MalformedDate as exc:
        logger.warning("%s, counting as day 0", exc)
        return 0


def _hour_or_zero(text: str) -> int:
    try:
        return parse_purchase_hour(text)
    except MalformedTime as exc:
        logger.warning("%s, counting as hour 0", exc)
        return 0


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def retailer_points(retailer: str) -> int:
    """1 point per ASCII letter or digit in the retailer name."""
    return len(ALNUM_RE.findall(retailer))


def round_dollar_points(total: str) -> int:
    """50 points if the total has no cents."""
    if is_multiple_of(price_or_zero(total), Decimal(1)):
        return ROUND_DOLLAR_POINTS
    return 0


def quarter_multiple_points(total: str) -> int:
    """25 points if the total is a multiple of 0.25."""
    if is_multiple_of(price_or_zero(total), QUARTER):
        return QUARTER_MULTIPLE_POINTS
    return 0


def item_pair_points(items: tuple[Item, ...]) -> int:
    """5 points for every two items."""
    return (len(items) // 2) * ITEM_PAIR_POINTS


def description_points(item: Item) -> int:
    """ceil(price * 0.2) when the trimmed description length is a multiple of 3."""
    if len(item.short_description.strip()) % 3 != 0:
        return 0
    bonus = math.ceil(Fraction(price_or_zero(item.price)) * DESCRIPTION_MULTIPLIER)
    # negative prices never take points away
    return max(bonus, 0)


def odd_day_points(purchase_date: str) -> int:
    """6 points if the day of the purchase date is odd."""
    if _day_or_zero(purchase_date) % 2 == 1:
        return ODD_DAY_POINTS
    return 0


def afternoon_points(purchase_time: str) -> int:
    """10 points for purchases made during the 2 PM hour."""
    if _hour_or_zero(purchase_time) == AFTERNOON_HOUR:
        return AFTERNOON_POINTS
    return 0


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def points_breakdown(receipt: Receipt) -> dict[str, int]:
    """Return the contribution of every rule, keyed by rule name."""
    return {
        "retailer": retailer_points(receipt.retailer),
        "round_dollar": round_dollar_points(receipt.total),
        "quarter_multiple": quarter_multiple_points(receipt.total),
        "item_pairs": item_pair_points(receipt.items),
        "descriptions": sum(description_points(item) for item in receipt.items),
        "odd_day": odd_day_points(receipt.purchase_date),
        "afternoon": afternoon_points(receipt.purchase_time),
    }


def calculate_points(receipt: Receipt) -> int:
    breakdown = points_breakdown(receipt)
    total = sum(breakdown.values())
    logger.debug("Points breakdown for %r: %s = %d", receipt.retailer, breakdown, total)
    return total
