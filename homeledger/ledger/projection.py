"""Mini README: Derived views over a ledger snapshot.

Structure:
    * Summary - income, expense and balance totals.
    * TransactionFilter - optional category and type predicates.
    * summarize / project / categories - pure functions of a snapshot.

Nothing here mutates the ledger. Views are recomputed from scratch after each
change; ledgers are small enough that incremental bookkeeping is not needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import Transaction, TransactionType


@dataclass(frozen=True, slots=True)
class Summary:
    """Aggregate totals for a ledger."""

    total_income: float = 0.0
    total_expense: float = 0.0

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expense

    @property
    def is_negative(self) -> bool:
        return self.balance < 0

    def as_dict(self) -> dict:
        return {
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "balance": self.balance,
        }


@dataclass(frozen=True, slots=True)
class TransactionFilter:
    """Equality predicates applied by ``project``; ``None`` disables one."""

    category: Optional[str] = None
    transaction_type: Optional[TransactionType] = None

    @classmethod
    def from_params(
        cls, category: Optional[str] = None, transaction_type: Optional[str] = None
    ) -> "TransactionFilter":
        """Build a filter from UI values where an empty string means "all"."""

        return cls(
            category=category or None,
            transaction_type=TransactionType.from_str(transaction_type) if transaction_type else None,
        )

    @property
    def is_active(self) -> bool:
        return self.category is not None or self.transaction_type is not None

    def matches(self, transaction: Transaction) -> bool:
        if self.category is not None and transaction.category != self.category:
            return False
        if self.transaction_type is not None and transaction.transaction_type is not self.transaction_type:
            return False
        return True


def summarize(ledger: Iterable[Transaction]) -> Summary:
    """Sum income and expense amounts."""

    income = 0.0
    expense = 0.0
    for transaction in ledger:
        if transaction.is_income:
            income += transaction.amount
        else:
            expense += transaction.amount
    return Summary(total_income=income, total_expense=expense)


def project(
    ledger: Iterable[Transaction], transaction_filter: Optional[TransactionFilter] = None
) -> List[Transaction]:
    """Return matching transactions, most recent date first.

    Entries sharing a date keep their insertion order.
    """

    selected = [t for t in ledger if transaction_filter is None or transaction_filter.matches(t)]
    return sorted(selected, key=lambda transaction: transaction.occurred_on, reverse=True)


def categories(ledger: Iterable[Transaction]) -> List[str]:
    """Distinct categories in the order they first appear."""

    return list(dict.fromkeys(transaction.category for transaction in ledger))
