"""Common dependencies for FastAPI routes."""

from __future__ import annotations

from fastapi import Request

from receipt_processor.services.receipt_store import ReceiptStore


def get_receipt_store(request: Request) -> ReceiptStore:
    """Return the store created with the application."""
    return request.app.state.receipt_store
