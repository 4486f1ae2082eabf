from __future__ import annotations

import string

import pytest

from receipt_processor.core import ids
from receipt_processor.core.exceptions import IdentifierGenerationError


def test_generate_receipt_id_is_hex_of_36_bytes():
    receipt_id = ids.generate_receipt_id()
    assert len(receipt_id) == 72
    assert set(receipt_id) <= set(string.hexdigits.lower())


def test_generate_receipt_id_is_unique():
    assert len({ids.generate_receipt_id() for _ in range(1000)}) == 1000


def test_generate_receipt_id_fails_loudly(monkeypatch):
    def broken(n):
        raise OSError("no entropy")

    monkeypatch.setattr(ids.secrets, "token_bytes", broken)
    with pytest.raises(IdentifierGenerationError):
        ids.generate_receipt_id()


def test_generate_receipt_id_rejects_short_read(monkeypatch):
    monkeypatch.setattr(ids.secrets, "token_bytes", lambda n: b"")
    with pytest.raises(IdentifierGenerationError):
        ids.generate_receipt_id()
