"""Mini README: Session object tying the ledger store to its views.

Structure:
    * Confirm - callable asking the user a yes/no question.
    * DashboardView - summary, projected rows and categories after a change.
    * FinanceTracker - the single per-session owner of the ledger store.
    * build_tracker - wires storage, settings and demo data together.

Every mutating operation persists through the store and then rebuilds the
dashboard from the whole ledger. Deleting one entry or wiping the ledger asks
the injected ``Confirm`` first; a declined prompt changes nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from .configuration import LedgerSettings
from .ledger import (
    JsonFileStorage,
    KeyValueStorage,
    LedgerStore,
    Summary,
    Transaction,
    TransactionDraft,
    TransactionFilter,
    TransactionType,
    categories,
    project,
    summarize,
)
from .logging_utils import get_logger

LOGGER = get_logger(__name__)

Confirm = Callable[[str], bool]

DELETE_PROMPT = "Are you sure you want to delete this transaction?"
CLEAR_PROMPT = "Are you sure you want to delete ALL transactions? This cannot be undone."


@dataclass(frozen=True, slots=True)
class DashboardView:
    """Everything the page needs to render after a change."""

    summary: Summary
    rows: List[Transaction]
    categories: List[str]
    active_filter: TransactionFilter

    def as_dict(self) -> dict:
        return {
            "summary": self.summary.as_dict(),
            "transactions": [row.as_dict() for row in self.rows],
            "categories": list(self.categories),
            "filter": {
                "category": self.active_filter.category,
                "type": self.active_filter.transaction_type.value
                if self.active_filter.transaction_type
                else None,
            },
        }


class FinanceTracker:
    """Coordinate mutations, confirmations and view rebuilding."""

    def __init__(self, store: LedgerStore, confirm: Confirm) -> None:
        self.store = store
        self._confirm = confirm
        self.active_filter = TransactionFilter()

    def dashboard(self) -> DashboardView:
        """Recompute the summary, filtered rows and category list."""

        snapshot = self.store.snapshot()
        return DashboardView(
            summary=summarize(snapshot),
            rows=project(snapshot, self.active_filter),
            categories=categories(snapshot),
            active_filter=self.active_filter,
        )

    def apply_filter(self, transaction_filter: TransactionFilter) -> DashboardView:
        self.active_filter = transaction_filter
        LOGGER.debug("Filter changed to %s", transaction_filter)
        return self.dashboard()

    def add_transaction(self, draft: TransactionDraft) -> Transaction:
        """Record a new entry submitted through the form."""

        return self.store.record(draft)

    def delete_transaction(self, transaction_id: int, confirm: Optional[Confirm] = None) -> bool:
        """Remove one entry after confirmation; returns whether anything changed."""

        if not (confirm or self._confirm)(DELETE_PROMPT):
            LOGGER.info("Deletion of transaction %s cancelled", transaction_id)
            return False
        return self.store.remove(transaction_id)

    def clear_transactions(self, confirm: Optional[Confirm] = None) -> bool:
        """Wipe the ledger after confirmation."""

        if not (confirm or self._confirm)(CLEAR_PROMPT):
            LOGGER.info("Clearing the ledger was cancelled")
            return False
        self.store.clear()
        return True

    def seed_demo_transactions(self, today: Optional[date] = None) -> None:
        """Record example entries so a fresh ledger is not empty."""

        occurred_on = today or date.today()
        examples = [
            ("Salary", 3500.0, "Salary", TransactionType.INCOME),
            ("Groceries", 250.0, "Food", TransactionType.EXPENSE),
            ("Electricity bill", 120.0, "Housing", TransactionType.EXPENSE),
        ]
        for description, amount, category, kind in examples:
            self.store.record(
                TransactionDraft(
                    description=description,
                    amount=amount,
                    category=category,
                    occurred_on=occurred_on,
                    transaction_type=kind,
                )
            )
        LOGGER.info("Seeded %s demo transactions", len(examples))


def build_tracker(
    settings: LedgerSettings,
    *,
    confirm: Confirm,
    storage: Optional[KeyValueStorage] = None,
) -> FinanceTracker:
    """Create the session tracker from settings, seeding demo data if enabled."""

    storage = storage if storage is not None else JsonFileStorage(settings.storage_file)
    tracker = FinanceTracker(LedgerStore(storage, settings.storage_key), confirm=confirm)
    if settings.seed_demo_data and len(tracker.store) == 0:
        tracker.seed_demo_transactions()
    return tracker