"""Same-day payment status classification"""

from datetime import date
from typing import AbstractSet, Iterable
from debt_tracker.domain.models import PaymentRecord, PaymentStatus
from debt_tracker.domain.schedule import is_scheduled_day


def has_payment_on(day: date, history: Iterable[PaymentRecord]) -> bool:
    """True if a payment (blank payments included) is recorded on the day"""
    return any(record.date == day and record.amount >= 0 for record in history)


def classify_payment_status(
    today: date,
    scheduled_weekdays: AbstractSet[int],
    history: Iterable[PaymentRecord],
) -> PaymentStatus:
    """
    Derive today's payment verdict.

    - not a scheduled day -> NOT_SCHEDULED (history is ignored)
    - scheduled and paid -> COMPLETED
    - scheduled and unpaid -> PENDING
    """
    if not is_scheduled_day(today, scheduled_weekdays):
        return PaymentStatus.NOT_SCHEDULED
    if has_payment_on(today, history):
        return PaymentStatus.COMPLETED
    return PaymentStatus.PENDING
