"""GET /v1/accounts/{key}/report - Debt status and deadline report"""

import time
import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from debt_tracker.api.v1.schemas import DebtStateSchema, DeadlineSchema, PaymentRecordSchema, ReportResponse
from debt_tracker.api.dependencies import get_ledger_client, get_request_id, get_today
from debt_tracker.config import settings
from debt_tracker.infrastructure.database.session import get_db
from debt_tracker.infrastructure.database.repositories import AccountRepository
from debt_tracker.infrastructure.clients.ledger import LedgerClient
from debt_tracker.domain.tracker import build_debt_report
from debt_tracker.domain.models import PaymentRecord
from debt_tracker.domain.exceptions import AccountConfigNotFoundError, LedgerAPIError
from debt_tracker.infrastructure.observability.metrics import record_report
from debt_tracker.infrastructure.observability.logging import log_report

router = APIRouter()


def to_payment_schemas(history: List[PaymentRecord]) -> List[PaymentRecordSchema]:
    return [
        PaymentRecordSchema(
            date=record.date,
            amount=record.amount,
            cleared=record.cleared.value,
            memo=record.memo,
            blank=record.is_blank,
        )
        for record in history
    ]


@router.get("/accounts/{account_key}/report", response_model=ReportResponse)
async def get_report(
    account_key: str,
    request: Request,
    db: Session = Depends(get_db),
    ledger_client: LedgerClient = Depends(get_ledger_client),
    today: date = Depends(get_today),
):
    """
    Evaluate a tracked debt against the ledger.

    Flow:
    1. Resolve the account schedule configuration
    2. Fetch balance and transactions from the ledger
    3. Reconcile history and evaluate status, deadline and projection
    4. Return the report
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        # 1. Resolve configuration once
        config = AccountRepository(db).get_config(account_key)

        # 2. Fetch ledger data
        balance_minor = await ledger_client.get_account_balance(config.account_id)
        transactions = await ledger_client.get_transactions(config.account_id)

        # 3. Evaluate
        report = build_debt_report(
            config,
            balance_minor,
            transactions,
            today,
            history_limit=settings.history_window,
            cadence_days=settings.finish_cadence_days,
        )

    except AccountConfigNotFoundError as e:
        logging.warning(str(e), extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    except LedgerAPIError as e:
        logging.error(f"Ledger API error: {e}", extra={"request_id": request_id, "account_key": account_key})
        raise HTTPException(status_code=503, detail="Ledger service unavailable")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    remaining = report.state.payment_days_remaining if config.deadline_active else None
    record_report(report.status.value, remaining)
    log_report(request_id, account_key, report.status.value, report.state.payment_days_remaining, duration_ms)

    deadline = None
    if report.deadline is not None:
        deadline = DeadlineSchema(
            end_date=report.deadline.end_date,
            enabled=report.deadline.enabled,
            show_days_remaining=report.deadline.show_days_remaining,
            description=report.deadline.description,
        )

    return ReportResponse(
        account_key=report.account_key,
        account_name=report.account_name,
        today=report.today,
        status=report.status.value,
        status_label=report.status.label,
        state=DebtStateSchema(
            outstanding_balance=report.state.outstanding_balance,
            payment_days_remaining=report.state.payment_days_remaining,
            calendar_days_until_deadline=report.state.calendar_days_until_deadline,
        ),
        payment_amount=config.payment_amount,
        max_payment_amount=config.max_payment_amount,
        min_payment_amount=config.min_payment_amount,
        payment_weekdays=sorted(config.scheduled_weekdays),
        deadline=deadline,
        projection_available=report.projection is not None,
        payments_left=report.projection.payments_left if report.projection else None,
        projected_finish_date=report.projection.finish_date if report.projection else None,
        history=to_payment_schemas(report.history),
    )
