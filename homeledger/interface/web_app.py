"""Mini README: FastAPI single-page interface for Home Ledger.

Structure:
    * create_application - application factory wiring routes and templates.

The page shows the income/expense/balance cards, the entry form, the category
and type filters and the transaction table. Form posts redirect back to the
page; ``/api/dashboard`` exposes the same view as JSON. Destructive forms ask
for confirmation in the browser and send the answer as ``confirmed``, which
is handed to the tracker as its confirmation capability.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import LedgerSettings, get_settings
from ..ledger import (
    DisplayFormat,
    KeyValueStorage,
    TransactionDraft,
    TransactionFilter,
    ValidationError,
    format_currency,
    format_date,
    format_signed_amount,
)
from ..logging_utils import configure_root_logger, get_logger, level_for_environment
from ..tracker import CLEAR_PROMPT, DELETE_PROMPT, FinanceTracker, build_tracker

LOGGER = get_logger(__name__)


def _decline(message: str) -> bool:
    """Default answer when a request carries no confirmation."""

    return False


def _filter_from_query(categoria: Optional[str], tipo: Optional[str]) -> TransactionFilter:
    try:
        return TransactionFilter.from_params(category=categoria, transaction_type=tipo)
    except ValidationError as error:
        raise HTTPException(status_code=400, detail=str(error)) from error


def create_application(
    settings: Optional[LedgerSettings] = None,
    storage: Optional[KeyValueStorage] = None,
) -> FastAPI:
    """Create the FastAPI application around a single finance tracker."""

    settings = settings or get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    app = FastAPI(title="Home Ledger", version="1.0.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    display = DisplayFormat.from_settings(settings)
    templates.env.filters["currency"] = lambda value: format_currency(value, display)
    templates.env.filters["display_date"] = lambda value: format_date(value, display)
    templates.env.filters["signed_amount"] = lambda value: format_signed_amount(value, display)

    tracker: FinanceTracker = build_tracker(settings, confirm=_decline, storage=storage)
    app.state.tracker = tracker

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(
        request: Request,
        categoria: Optional[str] = None,
        tipo: Optional[str] = None,
    ) -> HTMLResponse:
        """Render the ledger page with the requested filters applied."""

        view = tracker.apply_filter(_filter_from_query(categoria, tipo))
        LOGGER.debug(
            "Rendering %s of %s transactions", len(view.rows), len(tracker.store)
        )
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "view": view,
                "today": date.today().isoformat(),
                "delete_prompt": DELETE_PROMPT,
                "clear_prompt": CLEAR_PROMPT,
            },
        )

    @app.get("/api/dashboard")
    async def dashboard_json(
        categoria: Optional[str] = None,
        tipo: Optional[str] = None,
    ) -> JSONResponse:
        """Return summary, projected rows and categories as JSON."""

        view = tracker.apply_filter(_filter_from_query(categoria, tipo))
        return JSONResponse(view.as_dict())

    @app.post("/transactions")
    async def add_transaction(
        descricao: str = Form(...),
        valor: str = Form(...),
        categoria: str = Form(...),
        data: str = Form(...),
        tipo: str = Form(...),
    ) -> RedirectResponse:
        """Record a transaction submitted from the entry form."""

        try:
            draft = TransactionDraft.create(
                description=descricao,
                amount=valor,
                category=categoria,
                occurred_on=data,
                transaction_type=tipo,
            )
        except ValidationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        tracker.add_transaction(draft)
        return RedirectResponse("/", status_code=303)

    @app.post("/transactions/clear")
    async def clear_transactions(confirmed: bool = Form(False)) -> RedirectResponse:
        """Delete every transaction when the user confirmed the prompt."""

        tracker.clear_transactions(confirm=lambda message: confirmed)
        return RedirectResponse("/", status_code=303)

    @app.post("/transactions/{transaction_id}/delete")
    async def delete_transaction(
        transaction_id: int,
        confirmed: bool = Form(False),
    ) -> RedirectResponse:
        """Delete one transaction when the user confirmed the prompt."""

        tracker.delete_transaction(transaction_id, confirm=lambda message: confirmed)
        return RedirectResponse("/", status_code=303)

    return app
