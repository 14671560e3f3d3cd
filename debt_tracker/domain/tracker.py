"""Debt tracking report - ties the schedule, status and projection logic together"""

from datetime import date
from typing import Iterable, List
from debt_tracker.domain.currency import to_decimal
from debt_tracker.domain.exceptions import InvalidBlankPaymentReasonError
from debt_tracker.domain.history import DEFAULT_HISTORY_LIMIT, reconcile_history
from debt_tracker.domain.models import AccountScheduleConfig, DebtReport, DebtState, LedgerTransaction, PaymentRecord
from debt_tracker.domain.projection import DEFAULT_CADENCE_DAYS, project_finish_date
from debt_tracker.domain.schedule import days_until_deadline, payment_days_remaining
from debt_tracker.domain.status import classify_payment_status

BLANK_REASON_MAX_LENGTH = 200


def compute_debt_state(
    config: AccountScheduleConfig,
    balance_minor: int,
    history: List[PaymentRecord],
    today: date,
) -> DebtState:
    """
    Derive balance and deadline metrics for one account.

    The ledger reports debt balances as negative numbers; the outstanding
    balance is always the magnitude. Deadline counts are 0 unless the
    account has an enabled deadline.
    """
    outstanding = abs(to_decimal(balance_minor))

    if not config.deadline_active:
        return DebtState(outstanding_balance=outstanding, payment_days_remaining=0, calendar_days_until_deadline=0)

    end_date = config.deadline.end_date
    return DebtState(
        outstanding_balance=outstanding,
        payment_days_remaining=payment_days_remaining(today, end_date, config.scheduled_weekdays, history),
        calendar_days_until_deadline=days_until_deadline(today, end_date),
    )


def build_debt_report(
    config: AccountScheduleConfig,
    balance_minor: int,
    transactions: Iterable[LedgerTransaction],
    today: date,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
    cadence_days: int = DEFAULT_CADENCE_DAYS,
) -> DebtReport:
    """
    Main entry point: reconcile ledger data and evaluate the account.

    `today` is used for every component of the report so the status,
    remaining days and projection agree on the same day boundary.
    """
    history = reconcile_history(transactions, limit=history_limit)
    state = compute_debt_state(config, balance_minor, history, today)

    return DebtReport(
        account_key=config.key,
        account_name=config.name,
        today=today,
        state=state,
        status=classify_payment_status(today, config.scheduled_weekdays, history),
        history=history,
        projection=project_finish_date(state.outstanding_balance, config.payment_amount, today, cadence_days),
        deadline=config.deadline,
    )


def validate_blank_payment_reason(reason: str | None) -> str:
    """Return the trimmed reason or raise before anything is written"""
    cleaned = (reason or "").strip()
    if not cleaned:
        raise InvalidBlankPaymentReasonError("A reason is required for a blank payment")
    if len(cleaned) > BLANK_REASON_MAX_LENGTH:
        raise InvalidBlankPaymentReasonError(
            f"Blank payment reason exceeds {BLANK_REASON_MAX_LENGTH} characters"
        )
    return cleaned
