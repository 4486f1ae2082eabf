"""In-memory receipt store.

The store maps generated receipt IDs to the submitted receipt and the
points computed for it at submission time.  Entries are written once
and never replaced or evicted; they live as long as the process.

A single instance is created with the application and shared by all
request handlers, so every access to the underlying map happens under
one lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional

from receipt_processor.core.exceptions import DuplicateReceiptIdError
from receipt_processor.core.ids import generate_receipt_id
from receipt_processor.models.schemas import Receipt, StoreEntry
from receipt_processor.services.points_engine import compute_points

logger = logging.getLogger(__name__)


class ReceiptStore:
    """Thread-safe mapping of receipt ID to :class:`StoreEntry`."""

    def __init__(
        self,
        id_factory: Callable[[], str] = generate_receipt_id,
        scorer: Callable[[Receipt], int] = compute_points,
    ) -> None:
        self._id_factory = id_factory
        self._scorer = scorer
        self._entries: Dict[str, StoreEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._entries

    # ------------------------------------------------------------------
    # Storage contract

    def put(self, receipt_id: str, receipt: Receipt, points: int) -> StoreEntry:
        """Store a receipt and its points under ``receipt_id``.

        Raises :class:`DuplicateReceiptIdError` if the ID is already taken.
        """
        entry = StoreEntry(id=receipt_id, receipt=receipt, points=points)
        with self._lock:
            if receipt_id in self._entries:
                raise DuplicateReceiptIdError(receipt_id)
            self._entries[receipt_id] = entry
        return entry

    def get_receipt(self, receipt_id: str) -> Optional[Receipt]:
        with self._lock:
            entry = self._entries.get(receipt_id)
        return entry.receipt if entry else None

    def get_points(self, receipt_id: str) -> Optional[int]:
        with self._lock:
            entry = self._entries.get(receipt_id)
        return entry.points if entry else None

    # ------------------------------------------------------------------
    # Service operations

    def submit(self, receipt: Receipt) -> str:
        """Score a receipt, store it under a fresh ID and return the ID.

        Propagates :class:`~receipt_processor.core.exceptions.IdentifierGenerationError`
        from the ID factory; nothing is stored in that case.
        """
        receipt_id = self._id_factory()
        points = self._scorer(receipt)
        self.put(receipt_id, receipt, points)
        logger.info("[receipts:submit] id=%s retailer=%r points=%d", receipt_id, receipt.retailer, points)
        return receipt_id

    def lookup(self, receipt_id: str) -> Optional[int]:
        """Return the stored points for ``receipt_id`` or ``None`` if unknown.

        ``None`` is distinct from a receipt that genuinely scored zero.
        """
        points = self.get_points(receipt_id)
        if points is None:
            logger.info("[receipts:lookup] unknown id=%s", receipt_id)
        return points
