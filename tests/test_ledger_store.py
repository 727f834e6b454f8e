"""Mini README: Tests covering the ledger store's persistence and mutations.

Structure:
    * persistence - load after persist reproduces the ledger.
    * fail-open loading - malformed storage yields an empty ledger.
    * mutations - id assignment, duplicate rejection, remove and clear.
"""

from __future__ import annotations

import json
from datetime import date

import pytest

from homeledger.ledger import (
    JsonFileStorage,
    LedgerStore,
    MemoryStorage,
    Transaction,
    TransactionDraft,
    TransactionType,
    ValidationError,
)

KEY = "controle-financeiro-transactions"


def _draft(description: str, amount: float, kind: TransactionType, day: int = 1, category: str = "General") -> TransactionDraft:
    return TransactionDraft(
        description=description,
        amount=amount,
        category=category,
        occurred_on=date(2024, 1, day),
        transaction_type=kind,
    )


def test_load_returns_empty_when_key_absent() -> None:
    store = LedgerStore(MemoryStorage(), KEY)

    assert store.load() == ()
    assert len(store) == 0


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '{"id": 1}',
        '[{"id": 1}]',
        '[1, 2, 3]',
        '[{"id": 1, "descricao": "A", "valor": 1, "categoria": "X", "data": "2024-13-40", "tipo": "receita"}]',
        pytest.param(
            '[{"id": 1, "descricao": "A", "valor": 1' + "0" * 400 + ', "categoria": "X", "data": "2024-01-01", "tipo": "receita"}]',
            id="amount-overflows-float",
        ),
        pytest.param("[" * 100000 + "]" * 100000, id="deep-nesting"),
    ],
)
def test_load_fails_open_on_malformed_content(raw: str) -> None:
    """Unreadable content, including oversized numbers and runaway nesting, loads empty."""

    store = LedgerStore(MemoryStorage({KEY: raw}), KEY)

    assert store.snapshot() == ()


def test_persist_then_load_round_trips_entries_in_order() -> None:
    storage = MemoryStorage()
    store = LedgerStore(storage, KEY)
    store.record(_draft("Salary", 3500.0, TransactionType.INCOME, day=5, category="Salary"))
    store.record(_draft("Market", 250.0, TransactionType.EXPENSE, day=2, category="Food"))

    reloaded = LedgerStore(storage, KEY)

    assert reloaded.snapshot() == store.snapshot()
    assert [t.description for t in reloaded] == ["Salary", "Market"]


def test_every_mutation_is_persisted() -> None:
    storage = MemoryStorage()
    store = LedgerStore(storage, KEY)

    first = store.record(_draft("Salary", 3500.0, TransactionType.INCOME))
    assert len(json.loads(storage.get_item(KEY))) == 1

    store.record(_draft("Market", 250.0, TransactionType.EXPENSE))
    store.remove(first.transaction_id)
    records = json.loads(storage.get_item(KEY))
    assert [record["descricao"] for record in records] == ["Market"]


def test_record_assigns_increasing_unique_ids() -> None:
    store = LedgerStore(MemoryStorage(), KEY)

    ids = [store.record(_draft(f"Entry {n}", 10.0, TransactionType.EXPENSE)).transaction_id for n in range(5)]
    store.remove(ids[-1])
    ids.append(store.record(_draft("After removal", 1.0, TransactionType.INCOME)).transaction_id)

    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)


def test_record_continues_after_loaded_ids() -> None:
    """New ids never collide with ids already stored, however large."""

    legacy = Transaction(
        transaction_id=1704067200000,
        description="Old entry",
        amount=10.0,
        category="Misc",
        occurred_on=date(2024, 1, 1),
        transaction_type=TransactionType.EXPENSE,
    )
    storage = MemoryStorage({KEY: json.dumps([legacy.to_record()])})
    store = LedgerStore(storage, KEY)

    added = store.record(_draft("New entry", 5.0, TransactionType.INCOME))

    assert added.transaction_id == legacy.transaction_id + 1


def test_add_rejects_duplicate_ids() -> None:
    store = LedgerStore(MemoryStorage(), KEY)
    existing = store.record(_draft("Salary", 3500.0, TransactionType.INCOME))

    with pytest.raises(ValidationError):
        store.add(_draft("Copy", 1.0, TransactionType.INCOME).with_id(existing.transaction_id))
    assert len(store) == 1


def test_remove_unknown_id_is_a_no_op() -> None:
    storage = MemoryStorage()
    store = LedgerStore(storage, KEY)
    store.record(_draft("Salary", 3500.0, TransactionType.INCOME))
    before = storage.get_item(KEY)

    assert store.remove(999) is False
    assert len(store) == 1
    assert storage.get_item(KEY) == before


def test_clear_then_load_returns_empty_sequence() -> None:
    storage = MemoryStorage()
    store = LedgerStore(storage, KEY)
    store.record(_draft("Salary", 3500.0, TransactionType.INCOME))
    store.record(_draft("Market", 250.0, TransactionType.EXPENSE))

    store.clear()

    assert store.load() == ()
    assert json.loads(storage.get_item(KEY)) == []


def test_json_file_storage_survives_restart(tmp_path) -> None:
    path = tmp_path / "nested" / "storage.json"
    store = LedgerStore(JsonFileStorage(path), KEY)
    store.record(_draft("Salary", 3500.0, TransactionType.INCOME))

    reopened = LedgerStore(JsonFileStorage(path), KEY)

    assert [t.description for t in reopened] == ["Salary"]
    assert KEY in json.loads(path.read_text(encoding="utf-8"))


def test_json_file_storage_treats_corrupt_file_as_empty(tmp_path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{broken", encoding="utf-8")
    storage = JsonFileStorage(path)

    assert storage.get_item(KEY) is None
    storage.set_item(KEY, "[]")
    assert storage.get_item(KEY) == "[]"
    storage.remove_item(KEY)
    assert storage.get_item(KEY) is None


def test_json_file_storage_treats_undecodable_bytes_as_empty(tmp_path) -> None:
    """A file that is not UTF-8 loads as an empty ledger instead of crashing."""

    path = tmp_path / "storage.json"
    path.write_bytes(b'{"' + KEY.encode("ascii") + b'": "\xff\xfe[]"}')

    store = LedgerStore(JsonFileStorage(path), KEY)

    assert store.snapshot() == ()
    store.record(_draft("Salary", 3500.0, TransactionType.INCOME))
    assert [t.description for t in LedgerStore(JsonFileStorage(path), KEY)] == ["Salary"]
