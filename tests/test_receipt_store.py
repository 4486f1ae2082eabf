from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from receipt_factories import TARGET_RECEIPT, make_receipt
from receipt_processor.core.exceptions import DuplicateReceiptIdError, IdentifierGenerationError
from receipt_processor.models.schemas import Receipt
from receipt_processor.services.receipt_store import ReceiptStore


def test_submit_then_lookup_returns_computed_points(store):
    receipt = Receipt.model_validate(TARGET_RECEIPT)
    receipt_id = store.submit(receipt)
    assert store.lookup(receipt_id) == 28
    assert store.get_receipt(receipt_id) == receipt
    assert receipt_id in store


def test_lookup_unknown_id_is_none(store):
    assert store.lookup("does-not-exist") is None
    assert store.get_receipt("does-not-exist") is None


def test_zero_points_is_distinct_from_not_found(store):
    receipt_id = store.submit(make_receipt())
    assert store.lookup(receipt_id) == 0


def test_lookup_uses_the_full_identifier(store):
    receipt_id = store.submit(make_receipt(retailer="Target"))
    assert store.lookup(receipt_id[1:]) is None
    assert store.lookup(receipt_id) == 6


def test_put_refuses_to_replace_an_entry(store):
    receipt = make_receipt()
    entry = store.put("abc", receipt, 5)
    assert entry.points == 5
    with pytest.raises(DuplicateReceiptIdError):
        store.put("abc", receipt, 7)
    assert store.get_points("abc") == 5


def test_submit_propagates_id_failure_and_stores_nothing():
    def failing_ids():
        raise IdentifierGenerationError("randomness source unavailable")

    store = ReceiptStore(id_factory=failing_ids)
    with pytest.raises(IdentifierGenerationError):
        store.submit(make_receipt())
    assert len(store) == 0


def test_submit_uses_injected_scorer():
    store = ReceiptStore(id_factory=lambda: "fixed", scorer=lambda receipt: 42)
    assert store.submit(make_receipt()) == "fixed"
    assert store.lookup("fixed") == 42


def test_concurrent_submissions(store):
    receipt = Receipt.model_validate(TARGET_RECEIPT)
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: store.submit(receipt), range(200)))
    assert len(set(ids)) == 200
    assert len(store) == 200
    assert all(store.lookup(i) == 28 for i in ids)
