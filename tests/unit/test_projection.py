"""Unit tests for finish date projection"""

from datetime import date, timedelta
from decimal import Decimal
from debt_tracker.domain.projection import project_finish_date

TODAY = date(2026, 10, 19)


def test_projection_even_split():
    """300.00 at 20.00 per payment -> 15 payments, 225 days at 15-day cadence"""
    projection = project_finish_date(Decimal("300.00"), Decimal("20.00"), TODAY)

    assert projection.payments_left == 15
    assert projection.finish_date == TODAY + timedelta(days=225)
    assert projection.finish_date == date(2027, 6, 1)


def test_projection_rounds_payments_up():
    projection = project_finish_date(Decimal("310.00"), Decimal("20.00"), TODAY)
    assert projection.payments_left == 16
    assert projection.finish_date == TODAY + timedelta(days=240)


def test_projection_custom_cadence():
    projection = project_finish_date(Decimal("100.00"), Decimal("25.00"), TODAY, cadence_days=7)
    assert projection.payments_left == 4
    assert projection.finish_date == TODAY + timedelta(days=28)


def test_projection_not_applicable_without_payment_amount():
    assert project_finish_date(Decimal("300.00"), Decimal("0"), TODAY) is None
    assert project_finish_date(Decimal("300.00"), Decimal("-5.00"), TODAY) is None


def test_projection_paid_off():
    projection = project_finish_date(Decimal("0"), Decimal("20.00"), TODAY)
    assert projection.payments_left == 0
    assert projection.finish_date == TODAY
