"""GET /v1/accounts/{key}/history and /calendar - Payment history views"""

import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from debt_tracker.api.v1.report import to_payment_schemas
from debt_tracker.api.v1.schemas import CalendarDaySchema, CalendarResponse, HistoryResponse, TrendPointSchema
from debt_tracker.api.dependencies import get_ledger_client, get_request_id, get_today
from debt_tracker.config import settings
from debt_tracker.infrastructure.database.session import get_db
from debt_tracker.infrastructure.database.repositories import AccountRepository
from debt_tracker.infrastructure.clients.ledger import LedgerClient
from debt_tracker.domain.history import build_trend, reconcile_history
from debt_tracker.domain.schedule import build_month_calendar
from debt_tracker.domain.exceptions import AccountConfigNotFoundError, LedgerAPIError

router = APIRouter()


async def _load_history(account_key: str, request_id: str, db: Session, ledger_client: LedgerClient):
    try:
        config = AccountRepository(db).get_config(account_key)
        transactions = await ledger_client.get_transactions(config.account_id)
    except AccountConfigNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LedgerAPIError as e:
        logging.error(f"Ledger API error: {e}", extra={"request_id": request_id, "account_key": account_key})
        raise HTTPException(status_code=503, detail="Ledger service unavailable")

    return config, reconcile_history(transactions, limit=settings.history_window)


@router.get("/accounts/{account_key}/history", response_model=HistoryResponse)
async def get_history(
    account_key: str,
    request: Request,
    db: Session = Depends(get_db),
    ledger_client: LedgerClient = Depends(get_ledger_client),
):
    """
    Retrieve recent payments, newest first, with trend points.

    Returns:
        Up to `history_window` payments; blank payments are listed but
        left out of the trend
    """
    _, history = await _load_history(account_key, get_request_id(request), db, ledger_client)

    return HistoryResponse(
        account_key=account_key,
        payments=to_payment_schemas(history),
        trend=[TrendPointSchema(date=p.date, amount=p.amount) for p in build_trend(history)],
    )


@router.get("/accounts/{account_key}/calendar", response_model=CalendarResponse)
async def get_calendar(
    account_key: str,
    request: Request,
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
    ledger_client: LedgerClient = Depends(get_ledger_client),
    today: date = Depends(get_today),
):
    """Payment calendar for a month (default: current month)"""
    config, history = await _load_history(account_key, get_request_id(request), db, ledger_client)

    year = year or today.year
    month = month or today.month
    days = build_month_calendar(year, month, config.scheduled_weekdays, history)

    return CalendarResponse(
        account_key=account_key,
        year=year,
        month=month,
        days=[CalendarDaySchema(date=d.date, is_scheduled=d.is_scheduled, has_payment=d.has_payment) for d in days],
    )
