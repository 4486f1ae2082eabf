from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from receipt_processor.api.main import create_app
from receipt_processor.services.receipt_store import ReceiptStore


@pytest.fixture
def store() -> ReceiptStore:
    return ReceiptStore()


@pytest.fixture
def client(store: ReceiptStore) -> TestClient:
    return TestClient(create_app(store=store))
