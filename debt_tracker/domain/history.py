"""Ledger transaction reconciliation into payment history"""

from typing import Iterable, List
from debt_tracker.domain.currency import to_decimal
from debt_tracker.domain.models import ClearedState, LedgerTransaction, PaymentRecord, TrendPoint

DEFAULT_HISTORY_LIMIT = 20

_CLEARED_STATES = {
    "cleared": ClearedState.CLEARED,
    "reconciled": ClearedState.CLEARED,
    "uncleared": ClearedState.UNCLEARED,
}


def to_cleared_state(raw: str | None) -> ClearedState:
    return _CLEARED_STATES.get((raw or "").lower(), ClearedState.UNKNOWN)


def reconcile_history(
    transactions: Iterable[LedgerTransaction],
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> List[PaymentRecord]:
    """
    Normalize ledger transactions into newest-first payment records.

    Amounts become unsigned decimals. Only the `limit` most recent entries
    are kept, so anything older is invisible to deadline counting: with more
    than `limit` payments between today and a far deadline the remaining-day
    count overstates what is owed.
    """
    newest_first = sorted(transactions, key=lambda t: t.date, reverse=True)
    return [
        PaymentRecord(
            date=txn.date,
            amount=to_decimal(abs(txn.amount_minor)),
            cleared=to_cleared_state(txn.cleared),
            memo=txn.memo or None,
        )
        for txn in newest_first[:limit]
    ]


def build_trend(history: Iterable[PaymentRecord]) -> List[TrendPoint]:
    """Oldest-first payment amounts for trend charts, blank payments excluded"""
    points = [TrendPoint(date=record.date, amount=record.amount) for record in history if not record.is_blank]
    return sorted(points, key=lambda p: p.date)
