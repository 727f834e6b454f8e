"""Mini README: Household ledger domain package.

Groups the transaction model, the key-value storage backends, the ledger
store that owns and persists the transaction list, and the pure functions
deriving totals, filtered views and category lists from it.
"""

from .formatting import DisplayFormat, format_currency, format_date, format_signed_amount
from .models import Transaction, TransactionDraft, TransactionType, ValidationError
from .projection import Summary, TransactionFilter, categories, project, summarize
from .storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from .store import LedgerStore

__all__ = [
    "DisplayFormat",
    "JsonFileStorage",
    "KeyValueStorage",
    "LedgerStore",
    "MemoryStorage",
    "Summary",
    "Transaction",
    "TransactionDraft",
    "TransactionFilter",
    "TransactionType",
    "ValidationError",
    "categories",
    "format_currency",
    "format_date",
    "format_signed_amount",
    "project",
    "summarize",
]
