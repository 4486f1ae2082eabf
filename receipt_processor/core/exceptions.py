"""Exceptions raised by the receipt processing core.

The API layer maps these onto HTTP responses in
:mod:`receipt_processor.api.error_handlers`.
"""

from __future__ import annotations


class ReceiptProcessorError(Exception):
    """Base class for errors raised by the receipt processor."""


class IdentifierGenerationError(ReceiptProcessorError):
    """The randomness source failed while generating a receipt ID."""


class DuplicateReceiptIdError(ReceiptProcessorError):
    """A receipt ID was stored twice; stored entries are never replaced."""

    def __init__(self, receipt_id: str):
        super().__init__(f"receipt id already stored: {receipt_id}")
        self.receipt_id = receipt_id
