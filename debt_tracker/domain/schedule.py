"""Payment-day calendar and deadline obligation counting"""

import calendar
from datetime import date
from typing import AbstractSet, Iterable, List, Set
from debt_tracker.domain.models import CalendarDay, PaymentRecord
from debt_tracker.utils.date_utils import generate_date_range, weekday_ordinal


def is_scheduled_day(day: date, scheduled_weekdays: AbstractSet[int]) -> bool:
    """True when the day's weekday (Sunday = 0) is in the payment schedule"""
    return weekday_ordinal(day) in scheduled_weekdays


def count_scheduled_days(start: date, end: date, scheduled_weekdays: AbstractSet[int]) -> int:
    """Count scheduled payment days from start through end (inclusive)"""
    return sum(1 for day in generate_date_range(start, end) if is_scheduled_day(day, scheduled_weekdays))


def satisfied_payment_dates(
    today: date,
    deadline: date,
    scheduled_weekdays: AbstractSet[int],
    history: Iterable[PaymentRecord],
) -> Set[date]:
    """
    Distinct scheduled dates in [today, deadline] that already have a payment.

    Blank (zero-amount) payments satisfy the obligation just like real ones.
    Several records on the same date satisfy a single day.

    Only the reconciled history window is visible here: payments that fell
    out of the window are not counted.
    """
    return {
        record.date
        for record in history
        if today <= record.date <= deadline
        and is_scheduled_day(record.date, scheduled_weekdays)
        and record.amount >= 0
    }


def payment_days_remaining(
    today: date,
    deadline: date,
    scheduled_weekdays: AbstractSet[int],
    history: Iterable[PaymentRecord],
) -> int:
    """
    Scheduled payment days left until the deadline that are not yet paid.

    Counts scheduled days from today through the deadline (both inclusive)
    and subtracts the days already covered by a payment. Never negative;
    0 once the deadline has passed.
    """
    total = count_scheduled_days(today, deadline, scheduled_weekdays)
    satisfied = len(satisfied_payment_dates(today, deadline, scheduled_weekdays, history))
    return max(0, total - satisfied)


def days_until_deadline(today: date, deadline: date) -> int:
    """Calendar days until the deadline, 0 once it has passed"""
    return max(0, (deadline - today).days)


def build_month_calendar(
    year: int,
    month: int,
    scheduled_weekdays: AbstractSet[int],
    history: Iterable[PaymentRecord],
) -> List[CalendarDay]:
    """Day-by-day view of a month flagging payment days and recorded payments"""
    paid_dates = {record.date for record in history if record.amount >= 0}
    last_day = calendar.monthrange(year, month)[1]
    return [
        CalendarDay(
            date=day,
            is_scheduled=is_scheduled_day(day, scheduled_weekdays),
            has_payment=day in paid_dates,
        )
        for day in generate_date_range(date(year, month, 1), date(year, month, last_day))
    ]
