"""Receipt payloads and builders shared by the test modules."""

from __future__ import annotations

from typing import Any, Dict

from receipt_processor.models.schemas import Receipt

# Scores zero under every rule; tests override one field at a time.
NEUTRAL_RECEIPT: Dict[str, Any] = {
    "retailer": "",
    "purchaseDate": "2022-01-02",
    "purchaseTime": "13:01",
    "items": [],
    "total": "10.35",
}

TARGET_RECEIPT: Dict[str, Any] = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

MM_CORNER_MARKET_RECEIPT: Dict[str, Any] = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


def make_receipt(**overrides: Any) -> Receipt:
    """Build a receipt from the neutral payload with camelCase overrides."""
    payload = dict(NEUTRAL_RECEIPT)
    payload.update(overrides)
    return Receipt.model_validate(payload)
