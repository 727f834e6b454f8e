"""Mini README: Core package initializer for the Home Ledger application.

The package records household income and expenses, keeps them in a local
key-value store, and renders a single-page dashboard with totals and a
filterable transaction table. Only the logging helper is re-exported here so
importing the package stays free of web framework dependencies.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
