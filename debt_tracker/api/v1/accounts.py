"""PUT/GET /v1/accounts/{key} - Tracked account configuration"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from debt_tracker.api.v1.schemas import AccountConfigRequest, AccountConfigResponse, DeadlineSchema
from debt_tracker.infrastructure.database.session import get_db
from debt_tracker.infrastructure.database.repositories import AccountRepository
from debt_tracker.domain.exceptions import AccountConfigNotFoundError
from debt_tracker.domain.models import AccountScheduleConfig

router = APIRouter()


def to_config_response(config: AccountScheduleConfig) -> AccountConfigResponse:
    deadline = None
    if config.deadline is not None:
        deadline = DeadlineSchema(
            end_date=config.deadline.end_date,
            enabled=config.deadline.enabled,
            show_days_remaining=config.deadline.show_days_remaining,
            description=config.deadline.description,
        )

    return AccountConfigResponse(
        key=config.key,
        ledger_account_id=config.account_id,
        name=config.name,
        payment_amount=config.payment_amount,
        max_payment_amount=config.max_payment_amount,
        min_payment_amount=config.min_payment_amount,
        payment_weekdays=sorted(config.scheduled_weekdays),
        deadline=deadline,
        payment_accounts=dict(config.payment_accounts),
    )


@router.put("/accounts/{account_key}", response_model=AccountConfigResponse)
def put_account(account_key: str, request_body: AccountConfigRequest, db: Session = Depends(get_db)):
    """
    Register or replace the schedule configuration of a tracked debt.

    The configuration is read once per evaluation and never changed by it.
    """
    deadline = request_body.deadline
    repo = AccountRepository(db)
    repo.upsert_account(
        account_key,
        {
            "ledger_account_id": request_body.ledger_account_id,
            "name": request_body.name,
            "payment_amount": request_body.payment_amount,
            "max_payment_amount": request_body.max_payment_amount,
            "min_payment_amount": request_body.min_payment_amount,
            "payment_weekdays": request_body.payment_weekdays,
            "payment_accounts": request_body.payment_accounts,
            "deadline_end_date": deadline.end_date if deadline else None,
            "deadline_enabled": deadline.enabled if deadline else False,
            "show_days_remaining": deadline.show_days_remaining if deadline else True,
            "deadline_description": deadline.description if deadline else None,
        },
    )
    db.commit()
    logging.info("Account configuration saved", extra={"account_key": account_key})

    return to_config_response(repo.get_config(account_key))


@router.get("/accounts/{account_key}", response_model=AccountConfigResponse)
def get_account(account_key: str, db: Session = Depends(get_db)):
    """Retrieve the schedule configuration of a tracked debt"""
    try:
        config = AccountRepository(db).get_config(account_key)
    except AccountConfigNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return to_config_response(config)
