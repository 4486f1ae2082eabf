"""Points engine for scoring receipts.

The engine applies a fixed set of independent rules to a
:class:`~receipt_processor.models.schemas.Receipt` and sums their
contributions.  Every rule returns a tuple of the points it awards and a
short reasoning string; the reasoning is only used for debug logging.

Rules, in evaluation order:

* ``retailer`` – one point for every letter or digit in the retailer
  name.
* ``round_dollar`` – 50 points if the total ends in ``.00``.
* ``quarter_multiple`` – 25 points if the total is a multiple of
  ``0.25``.
* ``item_pairs`` – 5 points for every two items on the receipt.
* ``item_descriptions`` – for each item whose trimmed description
  length in UTF-8 bytes is a multiple of 3, the item price multiplied
  by ``0.2`` and rounded up to the nearest integer.
* ``odd_day`` – 6 points if the day in the purchase date is odd.
* ``afternoon`` – 10 points if the purchase time is after 14:00 and
  before 16:00 (both ends exclusive).

Scoring never fails.  A field that cannot be parsed makes its rule
award zero points and leaves the other rules untouched.  Amounts are
handled as :class:`~decimal.Decimal` so the quarter test and the
rounding in ``item_descriptions`` are exact.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from decimal import ROUND_CEILING, Decimal, localcontext
from typing import Callable, Dict, List, Tuple

from receipt_processor.models.schemas import Receipt
from receipt_processor.utils.helpers import parse_decimal, parse_purchase_date, parse_purchase_time

logger = logging.getLogger(__name__)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

DESCRIPTION_LENGTH_MULTIPLE = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
AFTERNOON_START = dt.time(14, 0)
AFTERNOON_END = dt.time(16, 0)


@dataclass(frozen=True)
class PointsBreakdown:
    """Per-rule contributions for a single receipt."""

    contributions: Dict[str, int] = field(default_factory=dict)
    reasons: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.contributions.values())


def _exact_precision(amount: Decimal) -> int:
    """Digits needed to multiply ``amount`` by 100 or 0.2 without rounding."""
    return len(amount.as_tuple().digits) + 3


def _score_retailer(receipt: Receipt) -> Tuple[int, str]:
    count = sum(1 for ch in receipt.retailer if ch.isalpha() or ch.isdecimal())
    return count, f"{count} alphanumeric characters in {receipt.retailer!r}"


def _score_round_dollar(receipt: Receipt) -> Tuple[int, str]:
    if receipt.total.endswith(".00"):
        return ROUND_DOLLAR_POINTS, f"total {receipt.total} is a round dollar amount"
    return 0, f"total {receipt.total} has cents"


def _score_quarter_multiple(receipt: Receipt) -> Tuple[int, str]:
    amount = parse_decimal(receipt.total)
    if amount is None:
        return 0, f"invalid total {receipt.total!r}"
    # Whole cents only; 0.125 is not a multiple of 0.25.
    with localcontext() as ctx:
        ctx.prec = _exact_precision(amount)
        cents = amount * 100
    if cents != cents.to_integral_value() or int(cents) % 25 != 0:
        return 0, f"total {receipt.total} is not a multiple of 0.25"
    return QUARTER_MULTIPLE_POINTS, f"total {receipt.total} is a multiple of 0.25"


def _score_item_pairs(receipt: Receipt) -> Tuple[int, str]:
    pairs = len(receipt.items) // 2
    return pairs * ITEM_PAIR_POINTS, f"{len(receipt.items)} items -> {pairs} pairs"


def _score_item_descriptions(receipt: Receipt) -> Tuple[int, str]:
    points = 0
    matched: List[str] = []
    for item in receipt.items:
        description = item.short_description.strip()
        # Length in UTF-8 bytes.
        if len(description.encode("utf-8")) % DESCRIPTION_LENGTH_MULTIPLE != 0:
            continue
        price = parse_decimal(item.price)
        if price is None:
            logger.debug("[points] skipping item %r with invalid price %r", description, item.price)
            continue
        with localcontext() as ctx:
            ctx.prec = _exact_precision(price)
            bonus = int((price * DESCRIPTION_PRICE_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING))
        points += bonus
        matched.append(f"{description!r}={bonus}")
    return points, f"descriptions matched {matched}"


def _score_odd_day(receipt: Receipt) -> Tuple[int, str]:
    purchase_date = parse_purchase_date(receipt.purchase_date)
    if purchase_date is None:
        return 0, f"invalid purchase date {receipt.purchase_date!r}"
    if purchase_date.day % 2 == 1:
        return ODD_DAY_POINTS, f"day {purchase_date.day} is odd"
    return 0, f"day {purchase_date.day} is even"


def _score_afternoon(receipt: Receipt) -> Tuple[int, str]:
    purchase_time = parse_purchase_time(receipt.purchase_time)
    if purchase_time is None:
        return 0, f"invalid purchase time {receipt.purchase_time!r}"
    if AFTERNOON_START < purchase_time < AFTERNOON_END:
        return AFTERNOON_POINTS, f"{receipt.purchase_time} is between 14:00 and 16:00"
    return 0, f"{receipt.purchase_time} is outside 14:00-16:00"


RULES: Tuple[Tuple[str, Callable[[Receipt], Tuple[int, str]]], ...] = (
    ("retailer", _score_retailer),
    ("round_dollar", _score_round_dollar),
    ("quarter_multiple", _score_quarter_multiple),
    ("item_pairs", _score_item_pairs),
    ("item_descriptions", _score_item_descriptions),
    ("odd_day", _score_odd_day),
    ("afternoon", _score_afternoon),
)


def compute_breakdown(receipt: Receipt) -> PointsBreakdown:
    """Evaluate every rule against a receipt.

    :param receipt: The receipt to score. It is only read.
    :returns: A :class:`PointsBreakdown` mapping each rule name to the
        points it awarded, with one reasoning string per rule.
    """
    contributions: Dict[str, int] = {}
    reasons: List[str] = []
    for name, rule in RULES:
        points, reason = rule(receipt)
        contributions[name] = points
        reasons.append(f"{name}: {reason} -> {points}")
    return PointsBreakdown(contributions=contributions, reasons=reasons)


def compute_points(receipt: Receipt) -> int:
    """Return the total points awarded to a receipt."""
    breakdown = compute_breakdown(receipt)
    if logger.isEnabledFor(logging.DEBUG):
        for reason in breakdown.reasons:
            logger.debug("[points] %s", reason)
    return breakdown.total
