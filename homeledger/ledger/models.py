"""Mini README: Transaction data model for the household ledger.

Structure:
    * ValidationError - raised when a candidate entry or an add is rejected.
    * TransactionType - enum distinguishing income from expense entries.
    * TransactionDraft - a candidate entry awaiting an identifier.
    * Transaction - frozen dataclass stored by the ledger.

Entries are never edited in place. The storage format uses Portuguese field
names and type codes (``descricao``, ``valor``, ``receita`` ...) so existing
stored ledgers keep loading; ``to_record``/``from_record`` translate between
that layout and the Python attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping


class ValidationError(ValueError):
    """Raised when a transaction payload or ledger operation is invalid."""


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce English names or stored codes, in any casing, into a type."""

        try:
            normalised = value.strip().lower()
            return cls(_TYPE_ALIASES.get(normalised, normalised))
        except (ValueError, AttributeError) as error:
            raise ValidationError(f"Unsupported transaction type: {value}") from error

    @property
    def storage_code(self) -> str:
        return _STORAGE_CODES[self]


_STORAGE_CODES = {TransactionType.INCOME: "receita", TransactionType.EXPENSE: "despesa"}
_TYPE_ALIASES = {code: kind.value for kind, code in _STORAGE_CODES.items()}


def _parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD.") from error
    raise ValidationError("Dates must be provided as ISO strings or date/datetime instances.")


def _parse_amount(value: object) -> float:
    """Parse a non-negative amount, accepting a decimal comma from form input."""

    if isinstance(value, bool):
        raise ValidationError("Amount must be a number.")
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as error:
        raise ValidationError(f"Invalid amount: {value!r}") from error
    if amount != amount or amount in (float("inf"), float("-inf")):
        raise ValidationError("Amount must be a finite number.")
    if amount < 0:
        raise ValidationError("Amount must not be negative; use the expense type instead.")
    return amount


def _parse_label(value: object, field_name: str) -> str:
    label = str(value if value is not None else "").strip()
    if not label:
        raise ValidationError(f"{field_name} must not be empty.")
    return label


@dataclass(frozen=True, slots=True)
class TransactionDraft:
    """Validated transaction fields awaiting an identifier from the ledger store."""

    description: str
    amount: float
    category: str
    occurred_on: date
    transaction_type: TransactionType

    @classmethod
    def create(
        cls,
        *,
        description: object,
        amount: object,
        category: object,
        occurred_on: object,
        transaction_type: object,
    ) -> "TransactionDraft":
        """Coerce raw (possibly form-encoded) values into a draft."""

        if isinstance(transaction_type, TransactionType):
            kind = transaction_type
        else:
            kind = TransactionType.from_str(str(transaction_type))
        return cls(
            description=_parse_label(description, "Description"),
            amount=_parse_amount(amount),
            category=_parse_label(category, "Category"),
            occurred_on=_parse_date(occurred_on),
            transaction_type=kind,
        )

    def with_id(self, transaction_id: int) -> "Transaction":
        return Transaction(
            transaction_id=transaction_id,
            description=self.description,
            amount=self.amount,
            category=self.category,
            occurred_on=self.occurred_on,
            transaction_type=self.transaction_type,
        )


@dataclass(frozen=True, slots=True)
class Transaction:
    """A recorded income or expense entry."""

    transaction_id: int
    description: str
    amount: float
    category: str
    occurred_on: date
    transaction_type: TransactionType

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    def to_record(self) -> Dict[str, Any]:
        """Export the transaction in the stored JSON layout."""

        return {
            "id": self.transaction_id,
            "descricao": self.description,
            "valor": self.amount,
            "categoria": self.category,
            "data": self.occurred_on.isoformat(),
            "tipo": self.transaction_type.storage_code,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Transaction":
        """Rebuild a transaction from the stored JSON layout.

        Raises ``ValidationError`` when a field is missing or malformed.
        """

        try:
            raw_id = record["id"]
            draft = TransactionDraft.create(
                description=record["descricao"],
                amount=record["valor"],
                category=record["categoria"],
                occurred_on=record["data"],
                transaction_type=record["tipo"],
            )
        except (KeyError, TypeError) as error:
            raise ValidationError(f"Stored transaction is incomplete: {record!r}") from error
        integral = isinstance(raw_id, int) or (isinstance(raw_id, float) and raw_id.is_integer())
        if isinstance(raw_id, bool) or not integral:
            raise ValidationError(f"Stored transaction id must be an integer: {raw_id!r}")
        return draft.with_id(int(raw_id))

    def as_dict(self) -> Dict[str, Any]:
        """Export the transaction with English keys for JSON responses."""

        return {
            "id": self.transaction_id,
            "description": self.description,
            "amount": self.amount,
            "category": self.category,
            "date": self.occurred_on.isoformat(),
            "type": self.transaction_type.value,
        }
