"""Mini README: Interactive interfaces for Home Ledger.

Exports the FastAPI application factory that serves the ledger page.
"""

from .web_app import create_application

__all__ = ["create_application"]
