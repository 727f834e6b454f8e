"""Mini README: Display formatting for money and dates.

Defaults follow Brazilian conventions (``R$ 1.234,56`` and ``31/12/2024``);
the launcher passes the configured symbol, separators and date pattern so
other locales only need different settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from .models import Transaction

if TYPE_CHECKING:
    from ..configuration import LedgerSettings


@dataclass(frozen=True, slots=True)
class DisplayFormat:
    """Currency and date conventions used when rendering values."""

    currency_symbol: str = "R$"
    decimal_separator: str = ","
    thousands_separator: str = "."
    date_format: str = "%d/%m/%Y"

    @classmethod
    def from_settings(cls, settings: "LedgerSettings") -> "DisplayFormat":
        return cls(
            currency_symbol=settings.currency_symbol,
            decimal_separator=settings.decimal_separator,
            thousands_separator=settings.thousands_separator,
            date_format=settings.date_format,
        )


DEFAULT_FORMAT = DisplayFormat()


def format_currency(value: float, display: DisplayFormat = DEFAULT_FORMAT) -> str:
    """Render ``value`` as e.g. ``R$ 3.500,00`` or ``-R$ 250,00``."""

    grouped = f"{abs(value):,.2f}"
    units, cents = grouped.split(".")
    units = units.replace(",", display.thousands_separator)
    sign = "-" if round(value, 2) < 0 else ""
    return f"{sign}{display.currency_symbol} {units}{display.decimal_separator}{cents}"


def format_date(value: date, display: DisplayFormat = DEFAULT_FORMAT) -> str:
    return value.strftime(display.date_format)


def format_signed_amount(transaction: Transaction, display: DisplayFormat = DEFAULT_FORMAT) -> str:
    """Prefix income with ``+`` and expenses with ``-`` as shown in the table."""

    sign = "+" if transaction.is_income else "-"
    return f"{sign} {format_currency(transaction.amount, display)}"
