"""Unit tests for debt report assembly"""

import pytest
from dataclasses import replace
from datetime import date, timedelta
from decimal import Decimal
from debt_tracker.domain.exceptions import InvalidBlankPaymentReasonError
from debt_tracker.domain.models import DeadlineConfig, LedgerTransaction, PaymentStatus
from debt_tracker.domain.tracker import build_debt_report, compute_debt_state, validate_blank_payment_reason


def test_build_debt_report_weekday_account(weekday_config, sample_transactions, today):
    """Last week's payments do not count towards the remaining deadline days"""
    report = build_debt_report(weekday_config, -300000, sample_transactions, today)

    assert report.account_key == "pickup"
    assert report.today == today
    assert report.status == PaymentStatus.PENDING
    assert report.state.outstanding_balance == Decimal("300.00")
    assert report.state.payment_days_remaining == 54  # Weekdays 19 Oct - 31 Dec 2026
    assert report.state.calendar_days_until_deadline == 73
    assert report.projection.payments_left == 15
    assert report.projection.finish_date == today + timedelta(days=225)
    assert len(report.history) == 5
    assert report.history[0].date == today - timedelta(days=3)


def test_build_debt_report_paid_today(weekday_config, sample_transactions, today):
    transactions = sample_transactions + [
        LedgerTransaction(transaction_id="today", date=today, amount_minor=20000, cleared="uncleared"),
    ]
    report = build_debt_report(weekday_config, -280000, transactions, today)

    assert report.status == PaymentStatus.COMPLETED
    assert report.state.payment_days_remaining == 53
    assert report.projection.payments_left == 14


def test_build_debt_report_is_idempotent(weekday_config, sample_transactions, today):
    first = build_debt_report(weekday_config, -300000, sample_transactions, today)
    second = build_debt_report(weekday_config, -300000, sample_transactions, today)
    assert first == second


def test_build_debt_report_not_applicable_projection(weekday_config, sample_transactions, today):
    config = replace(weekday_config, payment_amount=Decimal("0"))
    report = build_debt_report(config, -300000, sample_transactions, today)
    assert report.projection is None


def weekday_payments(start: date, end: date) -> list[LedgerTransaction]:
    days = (start + timedelta(days=n) for n in range((end - start).days + 1))
    return [
        LedgerTransaction(transaction_id=day.isoformat(), date=day, amount_minor=20000, cleared="cleared")
        for day in days
        if day.weekday() < 5
    ]


def test_build_debt_report_counts_only_retained_history(weekday_config, today):
    """25 scheduled days paid ahead, only the 20 most recent survive the history window"""
    deadline = date(2026, 11, 20)
    config = replace(weekday_config, deadline=DeadlineConfig(end_date=deadline))
    transactions = weekday_payments(today, deadline)
    assert len(transactions) == 25

    report = build_debt_report(config, -300000, transactions, today)

    assert len(report.history) == 20
    assert report.state.payment_days_remaining == 5


def test_build_debt_report_wider_history_window_clears_remaining_days(weekday_config, today):
    deadline = date(2026, 11, 20)
    config = replace(weekday_config, deadline=DeadlineConfig(end_date=deadline))

    report = build_debt_report(config, -300000, weekday_payments(today, deadline), today, history_limit=25)

    assert report.state.payment_days_remaining == 0


def test_compute_debt_state_without_deadline(weekday_config, today):
    config = replace(weekday_config, deadline=None)
    state = compute_debt_state(config, -150500, [], today)

    assert state.outstanding_balance == Decimal("150.5")
    assert state.payment_days_remaining == 0
    assert state.calendar_days_until_deadline == 0


def test_compute_debt_state_disabled_deadline(weekday_config, today):
    config = replace(weekday_config, deadline=DeadlineConfig(end_date=date(2026, 12, 31), enabled=False))
    state = compute_debt_state(config, -150500, [], today)
    assert state.payment_days_remaining == 0


def test_compute_debt_state_positive_balance_is_magnitude(weekday_config, today):
    state = compute_debt_state(weekday_config, 300000, [], today)
    assert state.outstanding_balance == Decimal("300")


def test_compute_debt_state_deadline_passed(weekday_config, today):
    config = replace(weekday_config, deadline=DeadlineConfig(end_date=today - timedelta(days=1)))
    state = compute_debt_state(config, -300000, [], today)

    assert state.payment_days_remaining == 0
    assert state.calendar_days_until_deadline == 0


def test_schedule_config_payment_accounts_are_read_only(weekday_config):
    with pytest.raises(TypeError):
        weekday_config.payment_accounts["Card"] = "card"

    assert weekday_config.payment_accounts == {"Cash": "cash"}
    assert hash(weekday_config) == hash(replace(weekday_config))


def test_validate_blank_payment_reason():
    assert validate_blank_payment_reason("  Truck at the mechanic ") == "Truck at the mechanic"

    with pytest.raises(InvalidBlankPaymentReasonError):
        validate_blank_payment_reason("   ")
    with pytest.raises(InvalidBlankPaymentReasonError):
        validate_blank_payment_reason(None)
    with pytest.raises(InvalidBlankPaymentReasonError):
        validate_blank_payment_reason("x" * 201)
