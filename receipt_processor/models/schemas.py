"""Pydantic schemas for the receipt domain and API responses.

Pydantic models validate the data that crosses the boundary of the
API so that only structurally well-formed receipts reach the points
engine.  Field *contents* (dates, times, amounts) are deliberately left
as strings: the engine parses them per rule and a malformed value only
forfeits that rule's points.

JSON uses camelCase keys (``purchaseDate``); Python code uses the
snake_case attribute names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Domain schemas


class Item(BaseModel):
    """Individual line item on a receipt."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(alias="shortDescription", description="Short product description")
    price: str = Field(description="Item price as a decimal string, e.g. 6.49")


class Receipt(BaseModel):
    """A submitted receipt. Immutable once validated."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate", description="Purchase date, YYYY-MM-DD")
    purchase_time: str = Field(alias="purchaseTime", description="Purchase time, HH:MM (24-hour)")
    items: Tuple[Item, ...]
    total: str = Field(description="Total amount paid as a decimal string")


@dataclass(frozen=True)
class StoreEntry:
    """A receipt together with its ID and the points computed at submission."""

    id: str
    receipt: Receipt
    points: int


# ---------------------------------------------------------------------------
# API response schemas


class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int


class ErrorResponse(BaseModel):
    error: str
