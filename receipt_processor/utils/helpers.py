"""Miscellaneous parsing helpers.

Each helper returns ``None`` instead of raising when the value cannot be
parsed, which lets the points engine treat malformed fields as
contributing nothing.
"""

from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_TIME_RE = re.compile(r"([0-9]{2}):([0-9]{2})")
_AMOUNT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)")

# Largest magnitude a float64 amount can hold is about 1.8e308.
MAX_AMOUNT_EXPONENT = 308


def parse_decimal(value: str | None) -> Optional[Decimal]:
    """Parse a plain ASCII decimal amount such as ``"12.25"``.

    Whitespace, exponents, digit separators, non-ASCII digits and
    amounts beyond float range are rejected.
    """
    if not value or not _AMOUNT_RE.fullmatch(value):
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return None
    if amount and amount.adjusted() > MAX_AMOUNT_EXPONENT:
        return None
    return amount


def parse_purchase_date(value: str | None) -> Optional[dt.date]:
    """Parse an exact ``YYYY-MM-DD`` calendar date."""
    if not value:
        return None
    match = _DATE_RE.fullmatch(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None


def parse_purchase_time(value: str | None) -> Optional[dt.time]:
    """Parse an exact 24-hour ``HH:MM`` time of day."""
    if not value:
        return None
    match = _TIME_RE.fullmatch(value)
    if not match:
        return None
    hour, minute = (int(part) for part in match.groups())
    try:
        return dt.time(hour, minute)
    except ValueError:
        return None
