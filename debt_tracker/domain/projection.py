"""Finish date projection for a flat balance and fixed payment"""

from datetime import date, timedelta
from decimal import Decimal, ROUND_CEILING
from typing import Optional
from debt_tracker.domain.models import FinishProjection

DEFAULT_CADENCE_DAYS = 15  # Semi-monthly


def project_finish_date(
    outstanding_balance: Decimal,
    payment_amount: Decimal,
    today: date,
    cadence_days: int = DEFAULT_CADENCE_DAYS,
) -> Optional[FinishProjection]:
    """
    Project when the debt is paid off at one payment every cadence_days.

    The cadence is independent of the weekday schedule: a Monday-Friday
    account still projects at one payment per cadence.

    Returns:
        FinishProjection, or None when payment_amount <= 0 (not applicable)

    Example:
        300.00 balance, 20.00 payment -> 15 payments -> today + 225 days
    """
    if payment_amount <= 0:
        return None

    balance = abs(Decimal(outstanding_balance))
    payments_left = int((balance / Decimal(payment_amount)).to_integral_value(rounding=ROUND_CEILING))

    return FinishProjection(
        payments_left=payments_left,
        finish_date=today + timedelta(days=payments_left * cadence_days),
    )
