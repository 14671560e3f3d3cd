"""Unit tests for ledger history reconciliation"""

from datetime import date, timedelta
from decimal import Decimal
from debt_tracker.domain.history import build_trend, reconcile_history
from debt_tracker.domain.models import ClearedState, LedgerTransaction, PaymentRecord

BASE = date(2026, 10, 1)


def txn(day: int, amount_minor: int, cleared: str = "cleared", memo: str | None = None) -> LedgerTransaction:
    return LedgerTransaction(
        transaction_id=f"t{day}",
        date=BASE + timedelta(days=day),
        amount_minor=amount_minor,
        cleared=cleared,
        memo=memo,
    )


def test_reconcile_history_sorts_newest_first_and_takes_magnitude():
    records = reconcile_history([txn(0, -20000), txn(5, 25000), txn(2, -10000)])

    assert [r.date for r in records] == [BASE + timedelta(days=5), BASE + timedelta(days=2), BASE]
    assert [r.amount for r in records] == [Decimal("25"), Decimal("10"), Decimal("20")]


def test_reconcile_history_truncates_to_most_recent():
    transactions = [txn(day, 20000) for day in range(25)]
    records = reconcile_history(transactions)

    assert len(records) == 20
    assert records[0].date == BASE + timedelta(days=24)
    assert records[-1].date == BASE + timedelta(days=5)


def test_reconcile_history_custom_limit():
    records = reconcile_history([txn(day, 20000) for day in range(10)], limit=3)
    assert len(records) == 3


def test_reconcile_history_cleared_and_memo():
    records = reconcile_history([
        txn(3, 0, cleared="uncleared", memo="Sick day"),
        txn(2, 20000, cleared="reconciled", memo=""),
        txn(1, 20000, cleared="pending"),
    ])

    assert records[0].cleared == ClearedState.UNCLEARED
    assert records[0].memo == "Sick day"
    assert records[0].is_blank is True
    assert records[1].cleared == ClearedState.CLEARED
    assert records[1].memo is None
    assert records[2].cleared == ClearedState.UNKNOWN


def test_reconcile_history_empty():
    assert reconcile_history([]) == []


def test_build_trend_excludes_blank_payments():
    history = [
        PaymentRecord(date=BASE + timedelta(days=2), amount=Decimal("20")),
        PaymentRecord(date=BASE + timedelta(days=1), amount=Decimal("0")),
        PaymentRecord(date=BASE, amount=Decimal("25")),
    ]
    trend = build_trend(history)

    assert [p.date for p in trend] == [BASE, BASE + timedelta(days=2)]
    assert [p.amount for p in trend] == [Decimal("25"), Decimal("20")]
