"""Mini README: Ledger store owning the ordered transaction collection.

Structure:
    * LedgerStore - loads, mutates and persists the transaction list.

Every mutation writes the complete list back to the key-value storage before
returning. Identifiers for new entries come from a per-store sequence that
always moves past the highest id already present, so ids loaded from older
ledgers (including large timestamp-based ones) are never reused. Callers are
responsible for asking the user before ``remove`` and ``clear``.
"""

from __future__ import annotations

import json
from typing import Iterator, List, Tuple

from ..logging_utils import get_logger
from .models import Transaction, TransactionDraft, ValidationError
from .storage import KeyValueStorage

LOGGER = get_logger(__name__)


class LedgerStore:
    """Manage the ledger's transactions and their durable copy."""

    def __init__(self, storage: KeyValueStorage, storage_key: str) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._transactions: List[Transaction] = list(self.load())
        self._sequence = max((t.transaction_id for t in self._transactions), default=0)
        LOGGER.debug("Ledger store initialised with %s transactions", len(self._transactions))

    def load(self) -> Tuple[Transaction, ...]:
        """Read the stored ledger, returning an empty one when unreadable."""

        raw = self._storage.get_item(self._storage_key)
        if raw is None:
            return ()
        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise ValidationError("Stored ledger is not a JSON array.")
            transactions = tuple(Transaction.from_record(record) for record in records)
        except (ValueError, RecursionError) as error:
            LOGGER.warning("Ignoring unreadable ledger under '%s': %s", self._storage_key, error)
            return ()
        if len({t.transaction_id for t in transactions}) != len(transactions):
            LOGGER.warning("Ignoring ledger under '%s': duplicate transaction ids", self._storage_key)
            return ()
        return transactions

    def persist(self) -> None:
        """Write the full collection to storage; failures propagate."""

        payload = json.dumps([t.to_record() for t in self._transactions], ensure_ascii=False)
        self._storage.set_item(self._storage_key, payload)
        LOGGER.debug("Persisted %s transactions", len(self._transactions))

    def _next_id(self) -> int:
        self._sequence += 1
        return self._sequence

    def add(self, transaction: Transaction) -> Transaction:
        """Append a transaction, rejecting identifiers already in use."""

        if transaction.transaction_id in self:
            raise ValidationError(f"Transaction {transaction.transaction_id} already exists.")
        self._transactions.append(transaction)
        self._sequence = max(self._sequence, transaction.transaction_id)
        self.persist()
        LOGGER.info(
            "Added %s transaction %s (%s)",
            transaction.transaction_type.value,
            transaction.transaction_id,
            transaction.description,
        )
        return transaction

    def record(self, draft: TransactionDraft) -> Transaction:
        """Assign the next identifier to a draft and add it."""

        return self.add(draft.with_id(self._next_id()))

    def remove(self, transaction_id: int) -> bool:
        """Drop the entry with ``transaction_id``; unknown ids are ignored."""

        remaining = [t for t in self._transactions if t.transaction_id != transaction_id]
        if len(remaining) == len(self._transactions):
            LOGGER.debug("Remove requested for unknown transaction %s", transaction_id)
            return False
        self._transactions = remaining
        self.persist()
        LOGGER.info("Removed transaction %s", transaction_id)
        return True

    def clear(self) -> None:
        """Remove every transaction."""

        count = len(self._transactions)
        self._transactions = []
        self.persist()
        LOGGER.info("Cleared %s transactions", count)

    def snapshot(self) -> Tuple[Transaction, ...]:
        """Return the transactions in insertion order."""

        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.snapshot())

    def __contains__(self, transaction_id: object) -> bool:
        return any(t.transaction_id == transaction_id for t in self._transactions)
