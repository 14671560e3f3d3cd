"""POST /v1/accounts/{key}/payments and /blank-payments - Record payments in the ledger"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from debt_tracker.api.v1.schemas import BlankPaymentRequest, PaymentRequest, PaymentResponse
from debt_tracker.api.dependencies import get_ledger_client, get_request_id, get_today
from debt_tracker.infrastructure.database.session import get_db
from debt_tracker.infrastructure.database.repositories import AccountRepository
from debt_tracker.infrastructure.clients.ledger import LedgerClient
from debt_tracker.domain.currency import to_decimal, to_minor_units
from debt_tracker.domain.tracker import validate_blank_payment_reason
from debt_tracker.domain.exceptions import (
    AccountConfigNotFoundError,
    InvalidBlankPaymentReasonError,
    LedgerAPIError,
)
from debt_tracker.infrastructure.observability.metrics import record_payment
from debt_tracker.infrastructure.observability.logging import log_payment_recorded

router = APIRouter()

BLANK_PAYMENT_PAYEE = "No payment today"


@router.post("/accounts/{account_key}/payments", response_model=PaymentResponse, status_code=201)
async def create_payment(
    account_key: str,
    request_body: PaymentRequest,
    request: Request,
    db: Session = Depends(get_db),
    ledger_client: LedgerClient = Depends(get_ledger_client),
    today: date = Depends(get_today),
):
    """
    Record a payment towards a tracked debt.

    If the account maps the payment method to a source account, the payment
    is a transfer from that account; otherwise it is a direct inflow on the
    debt account. The amount defaults to the configured payment amount.

    Direct payments are posted as positive inflows so they shrink the
    negative liability balance (see "Payment sign" in DESIGN.md).
    """
    request_id = get_request_id(request)

    try:
        config = AccountRepository(db).get_config(account_key)
        amount_minor = to_minor_units(request_body.amount or config.payment_amount)
        source_account_id = config.payment_accounts.get(request_body.method)

        if source_account_id:
            kind = "transfer"
            recorded = await ledger_client.create_transfer(
                source_account_id,
                config.account_id,
                amount_minor,
                memo=f"Debt payment via {request_body.method}",
                on=today,
            )
        else:
            kind = "direct"
            recorded = await ledger_client.create_transaction(
                config.account_id,
                abs(amount_minor),
                payee_name=f"Payment {request_body.method}",
                memo=f"Payment recorded via {request_body.method}",
                on=today,
            )

    except AccountConfigNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    except LedgerAPIError as e:
        logging.error(f"Ledger API error: {e}", extra={"request_id": request_id, "account_key": account_key})
        raise HTTPException(status_code=503, detail="Ledger service unavailable")

    record_payment(kind)
    log_payment_recorded(request_id, account_key, kind, recorded.amount_minor, recorded.transaction_id)

    return PaymentResponse(
        transaction_id=recorded.transaction_id,
        kind=kind,
        date=recorded.date,
        amount=abs(to_decimal(recorded.amount_minor)),
    )


@router.post("/accounts/{account_key}/blank-payments", response_model=PaymentResponse, status_code=201)
async def create_blank_payment(
    account_key: str,
    request_body: BlankPaymentRequest,
    request: Request,
    db: Session = Depends(get_db),
    ledger_client: LedgerClient = Depends(get_ledger_client),
    today: date = Depends(get_today),
):
    """
    Acknowledge a scheduled day without paying.

    Writes a zero-amount entry that satisfies the day's obligation. The
    reason is required and is validated before anything is written.
    """
    request_id = get_request_id(request)

    try:
        reason = validate_blank_payment_reason(request_body.reason)
        config = AccountRepository(db).get_config(account_key)
        recorded = await ledger_client.create_transaction(
            config.account_id,
            0,
            payee_name=BLANK_PAYMENT_PAYEE,
            memo=reason,
            on=today,
        )

    except InvalidBlankPaymentReasonError as e:
        raise HTTPException(status_code=422, detail=str(e))

    except AccountConfigNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    except LedgerAPIError as e:
        logging.error(f"Ledger API error: {e}", extra={"request_id": request_id, "account_key": account_key})
        raise HTTPException(status_code=503, detail="Ledger service unavailable")

    record_payment("blank")
    log_payment_recorded(request_id, account_key, "blank", recorded.amount_minor, recorded.transaction_id)

    return PaymentResponse(
        transaction_id=recorded.transaction_id,
        kind="blank",
        date=recorded.date,
        amount=to_decimal(recorded.amount_minor),
    )
