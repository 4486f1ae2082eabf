"""Receipt identifier generation."""

from __future__ import annotations

import secrets

from receipt_processor.core.exceptions import IdentifierGenerationError

RECEIPT_ID_BYTES = 36


def generate_receipt_id() -> str:
    """Return a new random, hex-encoded receipt identifier.

    The identifier carries no meaning and is never derived from receipt
    content.  Raises :class:`IdentifierGenerationError` when the operating
    system cannot supply random bytes.
    """
    try:
        key = secrets.token_bytes(RECEIPT_ID_BYTES)
    except (OSError, NotImplementedError) as exc:
        raise IdentifierGenerationError("randomness source unavailable") from exc
    if len(key) != RECEIPT_ID_BYTES:
        raise IdentifierGenerationError(f"expected {RECEIPT_ID_BYTES} random bytes, got {len(key)}")
    return key.hex()
